import pytest

@pytest.mark.parametrize("value", range(256))
def test_primitives_decode_canonical_renderings(logic, value):
    assert logic.hex_byte(f"{value:02x}") == ("", value)
    assert logic.hex_byte(f"{value:02X}") == ("", value)
    assert logic.bin_byte(f"{value:08b}") == ("", value)
    assert logic.dec_byte(str(value)) == ("", value)

@pytest.mark.parametrize(
    "text,expected",
    [
        ("ab", ("", 0xAB)),
        ("00ff", ("ff", 0x00)),
        ("Ef rest", (" rest", 0xEF)),
    ],
)
def test_hex_byte_takes_two_characters(logic, text, expected):
    assert logic.hex_byte(text) == expected

@pytest.mark.parametrize(
    "text,kind",
    [
        ("", "WRONG_LENGTH"),
        ("f", "WRONG_LENGTH"),
        ("g0", "INVALID_DIGIT"),
        ("0g", "INVALID_DIGIT"),
        ("+f", "INVALID_DIGIT"),
        (" f", "INVALID_DIGIT"),
        ("٣٣", "INVALID_DIGIT"),
    ],
)
def test_hex_byte_errors(logic, text, kind):
    with pytest.raises(logic.ParseError) as exc:
        logic.hex_byte(text)
    assert exc.value.kind is logic.ErrorKind[kind]
    assert exc.value.remaining == text

@pytest.mark.parametrize(
    "text,expected",
    [
        ("0", ("", 0)),
        ("255", ("", 255)),
        ("007", ("", 7)),
        ("12,13", (",13", 12)),
        ("99 bottles", (" bottles", 99)),
    ],
)
def test_dec_byte_is_greedy(logic, text, expected):
    assert logic.dec_byte(text) == expected

@pytest.mark.parametrize("text", ["256", "1000", "0000000256", "9" * 5000])
def test_dec_byte_overflow(logic, text):
    with pytest.raises(logic.ParseError) as exc:
        logic.dec_byte(text)
    assert exc.value.kind is logic.ErrorKind.OVERFLOW
    assert exc.value.remaining == text

@pytest.mark.parametrize("text", ["", "x1", "-1", " 1"])
def test_dec_byte_needs_a_digit(logic, text):
    with pytest.raises(logic.ParseError) as exc:
        logic.dec_byte(text)
    assert exc.value.kind is logic.ErrorKind.INVALID_DIGIT

def test_bin_byte_takes_eight_characters(logic):
    assert logic.bin_byte("101010101") == ("1", 0xAA)

@pytest.mark.parametrize(
    "text,kind",
    [
        ("1010101", "WRONG_LENGTH"),
        ("", "WRONG_LENGTH"),
        ("10101012", "INVALID_DIGIT"),
        ("1010 101", "INVALID_DIGIT"),
    ],
)
def test_bin_byte_errors(logic, text, kind):
    with pytest.raises(logic.ParseError) as exc:
        logic.bin_byte(text)
    assert exc.value.kind is logic.ErrorKind[kind]

@pytest.mark.parametrize(
    "func,token,expected",
    [
        ("from_hex", "7f", 0x7F),
        ("from_bin", "01111111", 0x7F),
        ("from_dec", "127", 0x7F),
    ],
)
def test_token_converters(logic, func, token, expected):
    assert getattr(logic, func)(token) == expected

@pytest.mark.parametrize(
    "func,token,kind",
    [
        ("from_hex", "fff", "WRONG_LENGTH"),
        ("from_hex", "f", "WRONG_LENGTH"),
        ("from_hex", "zz", "INVALID_DIGIT"),
        ("from_bin", "101010101", "WRONG_LENGTH"),
        ("from_bin", "0000000x", "INVALID_DIGIT"),
        ("from_dec", "", "INVALID_DIGIT"),
        ("from_dec", "12a", "INVALID_DIGIT"),
        ("from_dec", "300", "OVERFLOW"),
    ],
)
def test_token_converter_errors(logic, func, token, kind):
    with pytest.raises(logic.ParseError) as exc:
        getattr(logic, func)(token)
    assert exc.value.kind is logic.ErrorKind[kind]

@pytest.mark.parametrize(
    "func,text,expected",
    [
        ("hex_0x_byte", "0xab", ("", 0xAB)),
        ("hex_esc_byte", r"\xcd", ("", 0xCD)),
        ("bin_0b_byte", "0b00000001,", (",", 0x01)),
    ],
)
def test_prefixed_bytes(logic, func, text, expected):
    assert getattr(logic, func)(text) == expected

@pytest.mark.parametrize(
    "func,text",
    [
        ("hex_0x_byte", "0Xab"),
        ("hex_0x_byte", "ab"),
        ("hex_esc_byte", r"\Xcd"),
        ("hex_esc_byte", "xcd"),
        ("bin_0b_byte", "0B00000001"),
    ],
)
def test_prefixes_are_literal_and_case_sensitive(logic, func, text):
    with pytest.raises(logic.ParseError) as exc:
        getattr(logic, func)(text)
    assert exc.value.kind is logic.ErrorKind.EXPECTED_LITERAL
    assert exc.value.remaining == text
