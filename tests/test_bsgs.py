import pytest

from babygiant.bsgs import baby_giant, build_baby_table, chunk_bounds, giant_steps, search_chunk
from babygiant.ecc_utils import BABYJUBJUB, generator_point
from babygiant.errors import WorkerError

A = generator_point()


def mul(k):
    return BABYJUBJUB.scalar_multiply(k, A)


def test_chunk_bounds_even():
    assert chunk_bounds(16, 4) == [(0, 4), (4, 8), (8, 12), (12, 16)]


def test_chunk_bounds_last_absorbs_remainder():
    assert chunk_bounds(16, 3) == [(0, 5), (5, 10), (10, 16)]


def test_chunk_bounds_more_workers_than_steps():
    bounds = chunk_bounds(4, 8)
    assert bounds[:-1] == [(0, 0)] * 7
    assert bounds[-1] == (0, 4)


def test_chunk_bounds_rejects_zero_workers():
    with pytest.raises(ValueError):
        chunk_bounds(16, 0)


def test_build_baby_table():
    table = build_baby_table(BABYJUBJUB, A, 3, 7)
    assert len(table) == 4
    assert table == {mul(j): j for j in range(3, 7)}


def test_giant_steps():
    m = 16
    table = build_baby_table(BABYJUBJUB, A, 0, m)
    assert giant_steps(BABYJUBJUB, A, mul(200), m, table) == 200
    assert giant_steps(BABYJUBJUB, A, mul(0), m, table) == 0
    assert giant_steps(BABYJUBJUB, A, mul(m * m), m, table) is None


def test_search_chunk_only_matches_own_slice():
    m = 16
    # 37 = 2*16 + 5, so j = 5
    assert search_chunk(BABYJUBJUB, A, mul(37), m, 0, 8) == 37
    assert search_chunk(BABYJUBJUB, A, mul(37), m, 8, 16) is None


@pytest.mark.parametrize("num_threads", [1, 2, 3, 8])
@pytest.mark.parametrize("plaintext", [0, 37, 255])
def test_baby_giant(plaintext, num_threads):
    assert baby_giant(8, A, mul(plaintext), num_threads) == plaintext


def test_baby_giant_out_of_range():
    assert baby_giant(8, A, mul(256), 2) is None


def test_baby_giant_cancel_pending():
    assert baby_giant(8, A, mul(17), 4, cancel_pending=True) == 17


def test_baby_giant_rejects_zero_workers():
    with pytest.raises(ValueError):
        baby_giant(8, A, mul(1), 0)


def test_baby_giant_worker_failure():
    with pytest.raises(WorkerError, match="failed"):
        baby_giant(4, A, (1,), 2)
