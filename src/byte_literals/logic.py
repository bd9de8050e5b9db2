# byte_literals/logic.py

from __future__ import annotations

import enum
import functools
import logging
import re
from typing import Callable, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
# (text) -> (remaining text, value)
Parser = Callable[[str], Tuple[str, T]]
# (text, pos) -> (new pos, value)
CursorParser = Callable[[str, int], Tuple[int, T]]

BYTE_MAX = 255
HEX_WIDTH = 2
BIN_WIDTH = 8
WHITESPACE = " \t\r\n"

HEX_PREFIX = "0x"
ESC_PREFIX = "\\x"
BIN_PREFIX = "0b"
NEGATIVE_SIGN = "-"
COMMA = ","

_HEX_RE = re.compile(r"[0-9A-Fa-f]{2}")
_BIN_RE = re.compile(r"[01]{8}")
_DEC_RE = re.compile(r"[0-9]+")
_WS_RE = re.compile(r"[ \t\r\n]*")


# ---------------- Errors ----------------
class ErrorKind(enum.Enum):
    INVALID_DIGIT = "invalid digit"
    WRONG_LENGTH = "wrong length"
    OVERFLOW = "overflow"
    EXPECTED_LITERAL = "expected literal"
    EMPTY_SEQUENCE = "empty sequence"
    NO_ALTERNATIVE_MATCHED = "no alternative matched"
    TRAILING_INPUT = "trailing input"

class ParseError(ValueError):
    """A classified parse failure at position ``pos`` of ``text``.

    ``remaining`` is the unconsumed input at the point of failure, always a
    suffix of the text handed to the public entry point. ``attempts`` is only
    filled in by the dispatcher: one ``(name, ParseError)`` per alternative,
    in the order they were tried.
    """

    def __init__(
        self,
        kind: ErrorKind,
        text: str,
        pos: int = 0,
        message: str | None = None,
        attempts: Sequence[tuple[str, "ParseError"]] = (),
    ) -> None:
        self.kind = kind
        self.text = text
        self.pos = pos
        self.attempts = tuple(attempts)
        super().__init__(message or f"{kind.value} at {_excerpt(text, pos)}")

    @property
    def remaining(self) -> str:
        return self.text[self.pos:]

    def offset_in(self, source: str) -> int:
        """Character offset of the failure within ``source``."""
        return len(source) - (len(self.text) - self.pos)

    def __reduce__(self):
        return (
            type(self),
            (self.kind, self.remaining, 0, str(self), self.attempts),
        )

def _excerpt(text: str, pos: int = 0, limit: int = 16) -> str:
    if pos >= len(text):
        return "end of input"
    if len(text) - pos > limit:
        return repr(text[pos:pos + limit]) + "..."
    return repr(text[pos:])

def _expect(text: str, pos: int, marker: str) -> int:
    if not text.startswith(marker, pos):
        raise ParseError(
            ErrorKind.EXPECTED_LITERAL, text, pos,
            f"expected {marker!r} at {_excerpt(text, pos)}",
        )
    return pos + len(marker)


# ---------------- Cursor plumbing ----------------
def _text_api(at: CursorParser[T]) -> Parser[T]:
    """Expose a cursor parser as ``parse(text) -> (remaining, value)``.

    The cursor form stays reachable as ``parse.at`` for use with
    ``separated_list1``, ``many1`` and ``alt``.
    """
    @functools.wraps(at, assigned=("__module__", "__name__", "__qualname__", "__doc__"))
    def parse(text: str) -> tuple[str, T]:
        pos, value = at(text, 0)
        return text[pos:], value

    parse.at = at
    return parse


# ---------------- Token converters ----------------
def _fixed_width(text: str, pos: int, width: int, pattern: re.Pattern[str], what: str) -> int:
    available = len(text) - pos
    if available < width:
        raise ParseError(
            ErrorKind.WRONG_LENGTH, text, pos,
            f"expected {width} {what} digits, found {available}",
        )
    if not pattern.fullmatch(text, pos, pos + width):
        raise ParseError(
            ErrorKind.INVALID_DIGIT, text, pos,
            f"invalid {what} digit in {text[pos:pos + width]!r}",
        )
    return pos + width

def _dec_value(token: str, text: str, pos: int) -> int:
    # Trim leading zeros first so a long run never reaches int()
    digits = token.lstrip("0") or "0"
    if len(digits) > 3 or int(digits) > BYTE_MAX:
        raise ParseError(
            ErrorKind.OVERFLOW, text, pos,
            f"decimal value {_excerpt(token)} exceeds {BYTE_MAX}",
        )
    return int(digits)

def _whole_token(end: int, token: str, width: int) -> None:
    if end != len(token):
        raise ParseError(
            ErrorKind.WRONG_LENGTH, token, 0,
            f"expected exactly {width} digits, got {len(token)}",
        )

def from_hex(token: str) -> int:
    """Convert an isolated two-digit hex token (``"ff"``) to a byte."""
    end = _fixed_width(token, 0, HEX_WIDTH, _HEX_RE, "hex")
    _whole_token(end, token, HEX_WIDTH)
    return int(token, 16)

def from_bin(token: str) -> int:
    """Convert an isolated eight-digit binary token to a byte."""
    end = _fixed_width(token, 0, BIN_WIDTH, _BIN_RE, "binary")
    _whole_token(end, token, BIN_WIDTH)
    return int(token, 2)

def from_dec(token: str) -> int:
    """Convert an isolated decimal token (``"0"``..``"255"``) to a byte."""
    if not _DEC_RE.fullmatch(token):
        raise ParseError(
            ErrorKind.INVALID_DIGIT, token, 0,
            f"invalid decimal digit in {_excerpt(token)}",
        )
    return _dec_value(token, token, 0)


# ---------------- Primitive decoders ----------------
@_text_api
def hex_byte(text: str, pos: int = 0) -> tuple[int, int]:
    """Decode exactly two hex digits.

    Returns ``(remaining, value)``. Raises ``ParseError`` with
    ``WRONG_LENGTH`` if fewer than two characters are left, or
    ``INVALID_DIGIT`` if either one is not a hex digit.
    """
    end = _fixed_width(text, pos, HEX_WIDTH, _HEX_RE, "hex")
    return end, int(text[pos:end], 16)

@_text_api
def dec_byte(text: str, pos: int = 0) -> tuple[int, int]:
    """Decode the longest run of decimal digits; the value must be 0..255."""
    m = _DEC_RE.match(text, pos)
    if m is None:
        raise ParseError(
            ErrorKind.INVALID_DIGIT, text, pos,
            f"expected a decimal digit at {_excerpt(text, pos)}",
        )
    return m.end(), _dec_value(m.group(), text, pos)

@_text_api
def bin_byte(text: str, pos: int = 0) -> tuple[int, int]:
    # Eight binary digits never exceed 255, so there is no overflow case here.
    end = _fixed_width(text, pos, BIN_WIDTH, _BIN_RE, "binary")
    return end, int(text[pos:end], 2)


# ---------------- Signed values ----------------
def twos(value: int) -> int:
    """Byte-width two's complement negation: ``(256 - value) % 256``.

    Applying it twice returns the original value.
    """
    if not 0 <= value <= BYTE_MAX:
        raise ValueError(f"byte value must be 0..{BYTE_MAX}, got {value}")
    return (~value + 1) & BYTE_MAX

@_text_api
def dec_negative_byte(text: str, pos: int = 0) -> tuple[int, int]:
    end, magnitude = dec_byte.at(text, _expect(text, pos, NEGATIVE_SIGN))
    return end, twos(magnitude)

@_text_api
def dec_signed_byte(text: str, pos: int = 0) -> tuple[int, int]:
    """Unsigned decimal first, then ``-`` followed by a decimal magnitude.

    Magnitudes are not limited to 128: ``-200`` wraps to 56. When both
    branches fail the error from the signed branch is raised.
    """
    try:
        return dec_byte.at(text, pos)
    except ParseError:
        return dec_negative_byte.at(text, pos)


# ---------------- Prefixed bytes ----------------
@_text_api
def hex_0x_byte(text: str, pos: int = 0) -> tuple[int, int]:
    return hex_byte.at(text, _expect(text, pos, HEX_PREFIX))

@_text_api
def hex_esc_byte(text: str, pos: int = 0) -> tuple[int, int]:
    return hex_byte.at(text, _expect(text, pos, ESC_PREFIX))

@_text_api
def bin_0b_byte(text: str, pos: int = 0) -> tuple[int, int]:
    return bin_byte.at(text, _expect(text, pos, BIN_PREFIX))

@_text_api
def hex_negative_0x_byte(text: str, pos: int = 0) -> tuple[int, int]:
    end, magnitude = hex_0x_byte.at(text, _expect(text, pos, NEGATIVE_SIGN))
    return end, twos(magnitude)

@_text_api
def hex_signed_0x_byte(text: str, pos: int = 0) -> tuple[int, int]:
    """``-0x..`` first, then plain ``0x..``.

    The branch order is the reverse of ``dec_signed_byte``, so when both
    fail the error reported is the one from the unsigned branch.
    """
    try:
        return hex_negative_0x_byte.at(text, pos)
    except ParseError:
        return hex_0x_byte.at(text, pos)


# ---------------- Separators ----------------
@_text_api
def whitespace_separator(text: str, pos: int = 0) -> tuple[int, str]:
    """Zero or more of space, tab, CR, LF. Never fails."""
    m = _WS_RE.match(text, pos)
    return m.end(), m.group()

@_text_api
def comma_separator(text: str, pos: int = 0) -> tuple[int, str]:
    pos = _WS_RE.match(text, pos).end()
    pos = _expect(text, pos, COMMA)
    return _WS_RE.match(text, pos).end(), COMMA


# ---------------- Combinators ----------------
def separated_list1(element: CursorParser[T], separator: CursorParser[object]) -> CursorParser[list[T]]:
    """One or more ``element`` delimited by ``separator``.

    Takes and returns cursor parsers (``hex_byte.at``, ``comma_separator.at``).
    The repetition ends at the first separator that fails, or at the first
    element that fails after a separator; in both cases the cursor stays
    before that separator. Only a missing first element is an error
    (``EMPTY_SEQUENCE``, chained to the element's own error).
    Every element parser must consume input when it succeeds.
    """
    def parse(text: str, pos: int = 0) -> tuple[int, list[T]]:
        try:
            pos, first = element(text, pos)
        except ParseError as exc:
            raise ParseError(
                ErrorKind.EMPTY_SEQUENCE, text, pos,
                f"no first element at {_excerpt(text, pos)}: {exc}",
            ) from exc
        values = [first]
        while True:
            try:
                after_sep, _ = separator(text, pos)
                after_elem, value = element(text, after_sep)
            except ParseError:
                return pos, values
            values.append(value)
            pos = after_elem

    return parse

def many1(element: CursorParser[T]) -> CursorParser[list[T]]:
    """One or more ``element`` back to back, with nothing in between."""
    def parse(text: str, pos: int = 0) -> tuple[int, list[T]]:
        try:
            pos, first = element(text, pos)
        except ParseError as exc:
            raise ParseError(
                ErrorKind.EMPTY_SEQUENCE, text, pos,
                f"no first element at {_excerpt(text, pos)}: {exc}",
            ) from exc
        values = [first]
        while True:
            try:
                pos_next, value = element(text, pos)
            except ParseError:
                return pos, values
            values.append(value)
            pos = pos_next

    return parse

def _select(
    alternatives: Sequence[tuple[str, CursorParser[T]]], text: str, pos: int
) -> tuple[str, int, T]:
    attempts: list[tuple[str, ParseError]] = []
    for name, parser in alternatives:
        try:
            end, value = parser(text, pos)
        except ParseError as exc:
            attempts.append((name, exc))
            continue
        logger.debug("matched %s after %d failed attempt(s)", name, len(attempts))
        return name, end, value

    logger.debug("no alternative matched %s", _excerpt(text, pos))
    tried = ", ".join(name for name, _ in attempts)
    cause = attempts[-1][1] if attempts else None
    raise ParseError(
        ErrorKind.NO_ALTERNATIVE_MATCHED, text, pos,
        f"no notation matched {_excerpt(text, pos)} (tried {tried or 'nothing'})",
        attempts=attempts,
    ) from cause

def alt(*alternatives: tuple[str, CursorParser[T]]) -> CursorParser[T]:
    """Ordered choice over named cursor parsers; the first success wins.

    Every alternative starts from the same position. Raises
    ``NO_ALTERNATIVE_MATCHED`` carrying every ``(name, error)`` once all of
    them have failed.
    """
    def parse(text: str, pos: int = 0) -> tuple[int, T]:
        _, end, value = _select(alternatives, text, pos)
        return end, value

    return parse


# ---------------- Sequences ----------------
@_text_api
def hex_0x_seq(text: str, pos: int = 0) -> tuple[int, list[int]]:
    """``0xde, 0xad, 0xbe, 0xef``"""
    return separated_list1(hex_0x_byte.at, comma_separator.at)(text, pos)

@_text_api
def hex_esc_seq(text: str, pos: int = 0) -> tuple[int, list[int]]:
    r"""``\xde\xad\xbe\xef``"""
    return many1(hex_esc_byte.at)(text, pos)

@_text_api
def hex_seq(text: str, pos: int = 0) -> tuple[int, list[int]]:
    """``dead be ef``: bare pairs, any amount of whitespace (or none) between."""
    return separated_list1(hex_byte.at, whitespace_separator.at)(text, pos)

@_text_api
def hex_signed_seq(text: str, pos: int = 0) -> tuple[int, list[int]]:
    """``-0x01, 0x80``"""
    return separated_list1(hex_signed_0x_byte.at, comma_separator.at)(text, pos)

@_text_api
def bin_0b_seq(text: str, pos: int = 0) -> tuple[int, list[int]]:
    """``0b10101010, 0b10111011``"""
    return separated_list1(bin_0b_byte.at, comma_separator.at)(text, pos)

@_text_api
def dec_seq(text: str, pos: int = 0) -> tuple[int, list[int]]:
    """``1, 15, 255, 0``"""
    return separated_list1(dec_byte.at, comma_separator.at)(text, pos)

@_text_api
def dec_signed_seq(text: str, pos: int = 0) -> tuple[int, list[int]]:
    """``-1, 1, -127, 128``"""
    return separated_list1(dec_signed_byte.at, comma_separator.at)(text, pos)


# Marked notations come before bare ones; decimal goes last since any digit
# run would satisfy it.
SEQUENCE_PARSERS: tuple[tuple[str, Parser[list[int]]], ...] = (
    ("bin_0b", bin_0b_seq),
    ("hex_esc", hex_esc_seq),
    ("hex_0x", hex_0x_seq),
    ("hex_signed", hex_signed_seq),
    ("hex", hex_seq),
    ("dec", dec_seq),
    ("dec_signed", dec_signed_seq),
)


# ---------------- Dispatch ----------------
def _sequence_cursors() -> list[tuple[str, CursorParser[list[int]]]]:
    return [(name, parser.at) for name, parser in SEQUENCE_PARSERS]

@_text_api
def any_seq(text: str, pos: int = 0) -> tuple[int, list[int]]:
    """Parse a byte list in whichever notation matches first.

    Notations are tried in ``SEQUENCE_PARSERS`` order, each from the same
    starting point. The first one that parses a non-empty prefix wins, even
    if input is left over.
    """
    _, end, values = _select(_sequence_cursors(), text, pos)
    return end, values

def detect_notation(text: str) -> str:
    """Return the ``SEQUENCE_PARSERS`` name that ``any_seq`` would use."""
    name, _, _ = _select(_sequence_cursors(), text, 0)
    return name

def _complete(parser: CursorParser[T]) -> CursorParser[T]:
    def parse(text: str, pos: int) -> tuple[int, T]:
        end, value = parser(text, pos)
        if _WS_RE.match(text, end).end() != len(text):
            raise ParseError(
                ErrorKind.TRAILING_INPUT, text, end,
                f"unparsed input at {_excerpt(text, end)}",
            )
        return len(text), value

    return parse

def parse_bytes(text: str) -> bytes:
    """Parse a complete byte literal into ``bytes``.

    Accepts any notation ``any_seq`` does, e.g.:
      - "de ad be ef"
      - "0xde, 0xad, 0xbe, 0xef"
      - "\\xde\\xad\\xbe\\xef"
      - "-1, 1, -127, 128"
    Unlike ``any_seq`` a notation only wins if it consumes the whole input
    (surrounding whitespace aside), so "255, 1" is decimal rather than a
    partial hex match. Raises ``NO_ALTERNATIVE_MATCHED`` otherwise; a
    notation that matched only a prefix shows up in ``attempts`` as
    ``TRAILING_INPUT``.
    """
    start = _WS_RE.match(text).end()
    if start == len(text):
        raise ParseError(ErrorKind.EMPTY_SEQUENCE, text, start, "no bytes in input")

    complete = [(name, _complete(at)) for name, at in _sequence_cursors()]
    _, _, values = _select(complete, text, start)
    return bytes(values)
