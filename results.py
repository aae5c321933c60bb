"""
Result types for TallyUp arithmetic
An operation either succeeds with a number or fails with one of three sentinels
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union

import config


class ErrorKind(Enum):
    ERROR = config.ERROR_TEXT
    POSITIVE_INFINITY = config.POSITIVE_INFINITY_TEXT
    NEGATIVE_INFINITY = config.NEGATIVE_INFINITY_TEXT

    @property
    def text(self):
        """Sentinel string shown on the display"""
        return self.value

    @classmethod
    def for_infinity(cls, sign_source):
        """Signed infinity matching the sign of `sign_source`"""
        return cls.POSITIVE_INFINITY if sign_source > 0 else cls.NEGATIVE_INFINITY


@dataclass(frozen=True)
class Ok:
    value: float

    @property
    def is_ok(self):
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind

    @property
    def is_ok(self):
        return False


Result = Union[Ok, Err]
