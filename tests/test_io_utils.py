import pytest

from babygiant.io_utils import decode_be, encode_be, format_output, is_valid_format, load_input, pad_with_zeros

FULL = "0x05e712cbd0bee349ab612d42b81672d48546ab29a90798ad2b88f64585f0c805"
SHORT = "0xbdb2d53146a7d643d6c6870319fe563a253f78c18a48e3fa45b6d7d9d3c310"


def test_pad_with_zeros():
    assert pad_with_zeros("0x1") == "0x" + "0" * 63 + "1"
    assert pad_with_zeros("0x") == "0x" + "0" * 64
    assert pad_with_zeros(SHORT) == "0x00" + SHORT[2:]


def test_pad_leaves_other_strings_alone():
    assert pad_with_zeros(FULL) == FULL
    assert pad_with_zeros("abc") == "abc"
    assert pad_with_zeros("0x" + "1" * 65) == "0x" + "1" * 65


def test_is_valid_format():
    assert is_valid_format(FULL)
    assert is_valid_format(FULL.upper().replace("0X", "0x"))


@pytest.mark.parametrize("value", [
    FULL[2:],                       # missing prefix
    "0X" + FULL[2:],                # wrong prefix case
    FULL + "0",                     # 65 digits
    SHORT,                          # 62 digits, not padded
    FULL[:-1] + "g",                # not hex
    FULL + "\n",                    # trailing newline
    " " + FULL,
    "",
])
def test_is_valid_format_rejects(value):
    assert not is_valid_format(value)


def test_decode_be():
    assert decode_be("0x" + "00" * 31 + "01") == 1
    assert decode_be("0x01" + "00" * 31) == 1 << 248
    assert decode_be(FULL) == int(FULL, 16)


def test_padded_short_string_decodes_like_full_form():
    assert decode_be(pad_with_zeros(SHORT)) == decode_be("0x00" + SHORT[2:]) == int(SHORT, 16)


def test_encode_be():
    assert encode_be(1) == "0x" + "0" * 63 + "1"
    assert encode_be(decode_be(FULL)) == FULL
    with pytest.raises(ValueError):
        encode_be(-1)
    with pytest.raises(ValueError):
        encode_be(1 << 256)


def test_load_input(tmp_path):
    case = tmp_path / "testcase_1.txt"
    case.write_text(f"# comment\n\n{FULL}\n{SHORT}\n")
    assert load_input(case) == (FULL, SHORT)


def test_load_input_too_short(tmp_path):
    case = tmp_path / "testcase_1.txt"
    case.write_text(f"{FULL}\n")
    with pytest.raises(ValueError):
        load_input(case)


def test_format_output():
    report = format_output(42, elapsed=0.5, verified=True, expected=42)
    assert "Solution: plaintext = 42" in report
    assert "Verification (B = plaintext*A): PASSED" in report
    assert "Cross-check (vs answer file): PASSED" in report
    assert "Time: 0.500000 seconds" in report
