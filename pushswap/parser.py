"""Reading numbers and strategy flags from command-line arguments."""

from __future__ import annotations

from typing import Iterable

from .stack import Mode, Stack

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_FLAGS = {
    "--simple": Mode.SIMPLE,
    "--medium": Mode.MEDIUM,
    "--complex": Mode.COMPLEX,
    "--adaptive": Mode.ADAPTIVE,
}


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid stack."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _fail(stack: Stack | None) -> ParseError:
    if stack is not None:
        stack.clear()
    return ParseError()


def is_number(token: str) -> bool:
    """Return True for an optional sign followed by one or more digits."""
    if not token:
        return False
    body = token[1:] if token[0] in "+-" else token
    return bool(body) and all("0" <= ch <= "9" for ch in body)


def to_long(token: str) -> int:
    """Read an optional sign and the leading digits of ``token``."""
    sign = 1
    rest = token
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return result * sign


def check_flag(stack: Stack, token: str) -> bool:
    """Set the stack's mode from a flag; False when ``token`` is no flag.

    A second flag, or any non-number once a flag is set, is an error.
    """
    if stack.mode != Mode.NONE:
        raise _fail(stack)
    mode = _FLAGS.get(token)
    if mode is None:
        return False
    stack.mode = mode
    return True


def process_number(stack: Stack, token: str) -> None:
    """Add the number in ``token`` to the bottom of the stack."""
    number = to_long(token)
    if number < INT_MIN or number > INT_MAX:
        raise _fail(stack)
    stack.push_back(number)
    if stack.has_duplicate(number):
        raise _fail(stack)


def process_token(stack: Stack, token: str | None) -> None:
    """Handle a single number or flag."""
    if token is None:
        raise _fail(stack)
    if not is_number(token):
        if not check_flag(stack, token):
            raise ParseError()
        return
    process_number(stack, token)


def split_and_process_argument(stack: Stack, arg: str) -> None:
    """Split one argument on spaces and handle every token in it."""
    tokens = [token for token in arg.split(" ") if token]
    if not tokens:
        raise _fail(stack)
    for token in tokens:
        process_token(stack, token)


def parse_arguments(args: Iterable[str], stack: Stack | None = None) -> Stack:
    """Fill ``stack`` (or a new one) from the arguments and return it."""
    if stack is None:
        stack = Stack()
    for arg in args:
        split_and_process_argument(stack, arg)
    return stack