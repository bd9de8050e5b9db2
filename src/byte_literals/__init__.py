# byte_literals/__init__.py

"""Byte Literals package.

Re-exports the parsing core so callers can ``from byte_literals import any_seq``.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    about_text,
)

from .logic import (
    BYTE_MAX,
    HEX_WIDTH,
    BIN_WIDTH,
    WHITESPACE,
    HEX_PREFIX,
    ESC_PREFIX,
    BIN_PREFIX,
    NEGATIVE_SIGN,
    COMMA,
    SEQUENCE_PARSERS,
    ErrorKind,
    ParseError,
    from_hex,
    from_dec,
    from_bin,
    hex_byte,
    dec_byte,
    bin_byte,
    twos,
    dec_negative_byte,
    dec_signed_byte,
    hex_0x_byte,
    hex_esc_byte,
    bin_0b_byte,
    hex_negative_0x_byte,
    hex_signed_0x_byte,
    whitespace_separator,
    comma_separator,
    separated_list1,
    many1,
    alt,
    hex_0x_seq,
    hex_esc_seq,
    hex_seq,
    hex_signed_seq,
    bin_0b_seq,
    dec_seq,
    dec_signed_seq,
    any_seq,
    detect_notation,
    parse_bytes,
)

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE", "about_text",
    # Constants
    "BYTE_MAX", "HEX_WIDTH", "BIN_WIDTH", "WHITESPACE",
    "HEX_PREFIX", "ESC_PREFIX", "BIN_PREFIX", "NEGATIVE_SIGN", "COMMA",
    "SEQUENCE_PARSERS",
    # Errors
    "ErrorKind", "ParseError",
    # Bytes
    "from_hex", "from_dec", "from_bin",
    "hex_byte", "dec_byte", "bin_byte",
    "twos", "dec_negative_byte", "dec_signed_byte",
    "hex_0x_byte", "hex_esc_byte", "bin_0b_byte",
    "hex_negative_0x_byte", "hex_signed_0x_byte",
    # Separators and combinators
    "whitespace_separator", "comma_separator",
    "separated_list1", "many1", "alt",
    # Sequences
    "hex_0x_seq", "hex_esc_seq", "hex_seq", "hex_signed_seq",
    "bin_0b_seq", "dec_seq", "dec_signed_seq",
    "any_seq", "detect_notation", "parse_bytes",
]
