import pytest

from babygiant.ecc_utils import GENERATOR_TWISTED
from babygiant.generator import choose_plaintext, embed_plaintext, generate_test_case, generate_test_suite
from babygiant.io_utils import encode_be, load_input


def test_embed_zero_is_identity():
    assert embed_plaintext(0) == ("0x" + "0" * 64, "0x" + "0" * 63 + "1")


def test_embed_one_is_generator():
    gx, gy = GENERATOR_TWISTED
    assert embed_plaintext(1) == (encode_be(gx), encode_be(gy))


def test_embed_rejects_negative():
    with pytest.raises(ValueError):
        embed_plaintext(-1)


@pytest.mark.parametrize("case_num", [1, 2, 3, 4, 5])
def test_choose_plaintext_in_range(case_num):
    bits = 16
    p = choose_plaintext(case_num, bits)
    assert 0 <= p < 1 << bits
    if case_num == 1:
        assert p < 1 << (bits // 2)
    if case_num == 2:
        assert p % (1 << (bits // 2)) == 0
    if case_num == 4:
        assert p == (1 << bits) - 1


def test_generate_test_case(tmp_path):
    case, answer = generate_test_case(tmp_path, 3, plaintext=12345, bits=16)
    assert load_input(case) == embed_plaintext(12345)
    assert answer.read_text().strip() == "12345"


def test_generate_test_suite(tmp_path):
    out = tmp_path / "cases"
    generate_test_suite(out, num_cases=2, bits=16)
    assert sorted(p.name for p in out.iterdir()) == [
        "answer_1.txt", "answer_2.txt", "testcase_1.txt", "testcase_2.txt"]
