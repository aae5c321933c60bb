"""
Flask REST API for the TallyUp Calculator
Forwards keypad events from the browser UI to the calculator and returns the display
"""
import logging

from flask import Flask, jsonify, request
from flask_cors import CORS

import config
from calculator import DIGITS
from context import CalculatorContext
from operations import normalize_operator

logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)  # Enable CORS for all routes

# Initialize components
context = CalculatorContext()

MEMORY_ACTIONS = {
    'store': 'memory_store',
    'recall': 'memory_recall',
    'clear': 'memory_clear',
    'add': 'memory_add',
    'subtract': 'memory_subtract',
}


def _state_response():
    return jsonify({
        'success': True,
        'data': context.calculator.snapshot()
    })


def _error_response(message, status):
    return jsonify({'success': False, 'error': message}), status


def _perform(action, *args):
    """Run one calculator action and return the resulting display state"""
    try:
        getattr(context.calculator, action)(*args)
        return _state_response()
    except Exception as e:
        logger.exception("Calculator action %s failed", action)
        return _error_response(str(e), 500)


@app.route('/api')
def api_info():
    """API information page"""
    return f"""
    <html>
    <head><title>{config.APP_NAME} API</title></head>
    <body style="font-family: Arial; padding: 40px;">
        <h1>{config.APP_NAME} API Server</h1>
        <h2>Available Endpoints:</h2>
        <ul>
            <li>GET /api/state - Current display, expression and memory indicator</li>
            <li>POST /api/digit - Input a digit, body {{"digit": "5"}}</li>
            <li>POST /api/operator - Select an operator, body {{"operator": "+"}}</li>
            <li>POST /api/decimal, /api/equals, /api/clear, /api/delete, /api/percentage</li>
            <li>POST /api/memory/&lt;store|recall|clear|add|subtract&gt; - Memory keys</li>
            <li>GET /api/history?limit=10 - Calculation history</li>
            <li>DELETE /api/history - Clear calculation history</li>
        </ul>
    </body>
    </html>
    """


@app.route('/api/state')
def get_state():
    """Get the current display state"""
    return _state_response()


@app.route('/api/digit', methods=['POST'])
def input_digit():
    payload = request.get_json(silent=True) or {}
    digit = payload.get('digit')

    if not isinstance(digit, str) or len(digit) != 1 or digit not in DIGITS:
        return _error_response("'digit' must be a single character 0-9", 400)

    return _perform('input_digit', digit)


@app.route('/api/operator', methods=['POST'])
def input_operator():
    payload = request.get_json(silent=True) or {}
    symbol = payload.get('operator')

    if normalize_operator(symbol) is None:
        return _error_response("'operator' must be one of + - × ÷ * /", 400)

    return _perform('input_operator', symbol)


@app.route('/api/decimal', methods=['POST'])
def input_decimal():
    return _perform('input_decimal')


@app.route('/api/equals', methods=['POST'])
def equals():
    return _perform('equals')


@app.route('/api/clear', methods=['POST'])
def clear():
    return _perform('clear')


@app.route('/api/delete', methods=['POST'])
def delete():
    return _perform('delete')


@app.route('/api/percentage', methods=['POST'])
def percentage():
    return _perform('percentage')


@app.route('/api/memory/<action>', methods=['POST'])
def memory_action(action):
    """Memory keys: store, recall, clear, add, subtract"""
    if action not in MEMORY_ACTIONS:
        return _error_response(f"Unknown memory action: {action}", 404)

    return _perform(MEMORY_ACTIONS[action])


@app.route('/api/history', methods=['GET'])
def get_history():
    """Get calculation history"""
    try:
        limit = int(request.args.get('limit', config.DEFAULT_HISTORY_LIMIT))
    except ValueError:
        return _error_response("'limit' must be an integer", 400)

    try:
        entries = context.calculator.get_history(limit)
        formatted = [entry.to_dict() for entry in entries]

        return jsonify({
            'success': True,
            'data': formatted,
            'count': len(formatted)
        })
    except Exception as e:
        logger.exception("Reading history failed")
        return _error_response(str(e), 500)


@app.route('/api/history', methods=['DELETE'])
def clear_history():
    """Clear calculation history"""
    context.memory.clear_history()
    return jsonify({'success': True, 'data': [], 'count': 0})


def main():
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    print("\n" + "="*60)
    print(f"{config.APP_NAME} API Server")
    print("="*60)
    print(f"Server starting on http://{config.WEB_HOST}:{config.WEB_PORT}")
    print("="*60 + "\n")

    # One request at a time: every keypad event completes before the next is handled
    app.run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False, threaded=False)


if __name__ == '__main__':
    main()
