"""
Tests for the Flask API endpoints.
"""
import pytest

import api


@pytest.fixture
def client():
    """Create a test client with a fresh calculator context."""
    api.context.reset()
    api.app.config['TESTING'] = True
    return api.app.test_client()


def press_keys(client, *keys):
    response = None
    for key in keys:
        if key.isdigit():
            response = client.post('/api/digit', json={'digit': key})
        elif key in ('+', '-', '×', '÷', '*', '/'):
            response = client.post('/api/operator', json={'operator': key})
        else:
            response = client.post(f'/api/{key}')
    return response


class TestInfoEndpoint:
    """Tests for /api."""

    def test_api_info(self, client):
        response = client.get('/api')

        assert response.status_code == 200
        assert b"TallyUp Calculator" in response.data


class TestKeypadEndpoints:
    """Tests for the keypad endpoints."""

    def test_initial_state(self, client):
        response = client.get('/api/state')

        assert response.status_code == 200
        data = response.get_json()
        assert data['success'] is True
        assert data['data'] == {
            'display': "0",
            'expression': "",
            'has_memory': False,
            'state': "Idle",
        }

    def test_addition(self, client):
        response = press_keys(client, '5', '+', '3', 'equals')

        assert response.status_code == 200
        data = response.get_json()['data']
        assert data['display'] == "8"
        assert data['expression'] == "5 + 3 ="

    def test_decimal_percentage_delete_clear(self, client):
        data = press_keys(client, '1', 'decimal', '5').get_json()['data']
        assert data['display'] == "1.5"

        data = press_keys(client, 'delete').get_json()['data']
        assert data['display'] == "1."

        data = press_keys(client, '0', 'percentage').get_json()['data']
        assert data['display'] == "0.01"

        data = press_keys(client, 'clear').get_json()['data']
        assert data['display'] == "0"

    def test_division_by_zero(self, client):
        data = press_keys(client, '5', '÷', '0', 'equals').get_json()['data']
        assert data['display'] == "Infinity"

    def test_invalid_digit(self, client):
        response = client.post('/api/digit', json={'digit': 'x'})

        assert response.status_code == 400
        assert response.get_json()['success'] is False

    def test_missing_body(self, client):
        response = client.post('/api/digit')
        assert response.status_code == 400

    def test_invalid_operator(self, client):
        response = client.post('/api/operator', json={'operator': '^'})
        assert response.status_code == 400


class TestMemoryEndpoints:
    """Tests for /api/memory/<action>."""

    def test_store_and_recall(self, client):
        press_keys(client, '4', '2')
        data = client.post('/api/memory/store').get_json()['data']
        assert data['has_memory'] is True

        press_keys(client, 'clear')
        data = client.post('/api/memory/recall').get_json()['data']
        assert data['display'] == "42"

        data = client.post('/api/memory/clear').get_json()['data']
        assert data['has_memory'] is False

    def test_unknown_action(self, client):
        response = client.post('/api/memory/multiply')
        assert response.status_code == 404


class TestHistoryEndpoints:
    """Tests for /api/history."""

    def test_history(self, client):
        press_keys(client, '5', '+', '3', 'equals')
        press_keys(client, '5', '÷', '0', 'equals')

        response = client.get('/api/history')
        assert response.status_code == 200

        payload = response.get_json()
        assert payload['count'] == 2
        assert payload['data'][0]['operation'] == "5 ÷ 0"
        assert payload['data'][0]['result'] == "Infinity"
        assert payload['data'][1]['result'] == 8.0
        assert payload['data'][1]['display'] == "8"

    def test_history_limit(self, client):
        for _ in range(3):
            press_keys(client, '1', '+', '1', 'equals')

        payload = client.get('/api/history?limit=2').get_json()
        assert payload['count'] == 2

    def test_invalid_limit(self, client):
        response = client.get('/api/history?limit=abc')
        assert response.status_code == 400

    def test_clear_history(self, client):
        press_keys(client, '5', '+', '3', 'equals')

        response = client.delete('/api/history')
        assert response.status_code == 200
        assert client.get('/api/history').get_json()['count'] == 0
