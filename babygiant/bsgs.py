"""
Baby-Step Giant-Step (BSGS) Algorithm for bounded discrete logarithms

Given B = p*A with 0 <= p < 2^w, finds p by writing p = i*m + j with m = 2^(w/2):
1. Baby steps: each worker stores j*A for j in its own slice [start, end) of [0, m)
2. Giant steps: each worker checks B - i*m*A for every i in [0, m) against its slice

Workers are OS processes sharing nothing but a result queue. The first worker
to report a match wins. The others keep running in the background until they
finish (or until interpreter exit) unless cancel_pending is set.

Time Complexity: O(m) per worker
Space Complexity: O(m / num_threads) per worker
"""

import logging
import multiprocessing
import queue
import traceback
from typing import Dict, Iterable, List, Optional, Tuple

from .ecc_utils import BABYJUBJUB, Point, TwistedEdwardsCurve
from .errors import WorkerError

logger = logging.getLogger(__name__)

# Seconds between liveness checks while waiting on the result queue
POLL_INTERVAL = 0.5


def chunk_bounds(m: int, num_threads: int) -> List[Tuple[int, int]]:
    """
    Split [0, m) into num_threads contiguous slices.

    Every slice has m // num_threads elements except the last, which absorbs
    the remainder.
    """
    if num_threads < 1:
        raise ValueError(f"num_threads must be at least 1, got {num_threads}")

    chunk_size = m // num_threads
    bounds = []
    for idx in range(num_threads):
        start = idx * chunk_size
        end = m if idx == num_threads - 1 else start + chunk_size
        bounds.append((start, end))
    return bounds


def build_baby_table(curve: TwistedEdwardsCurve, A: Point, start: int, end: int) -> Dict[Point, int]:
    """Map j*A -> j for j in [start, end), stepping by point addition."""
    table: Dict[Point, int] = {}
    R = curve.scalar_multiply(start, A)

    for j in range(start, end):
        if R not in table:
            table[R] = j
        R = curve.add(R, A)

    return table


def giant_steps(curve: TwistedEdwardsCurve, A: Point, B: Point, m: int,
                table: Dict[Point, int]) -> Optional[int]:
    """Check B - i*m*A for i = 0, 1, ..., m-1 against table."""
    neg_mA = curve.negate(curve.scalar_multiply(m, A))

    gamma = B
    for i in range(m):
        j = table.get(gamma)
        if j is not None:
            return i * m + j
        gamma = curve.add(gamma, neg_mA)

    return None


def search_chunk(curve: TwistedEdwardsCurve, A: Point, B: Point, m: int,
                 start: int, end: int) -> Optional[int]:
    """Run one worker's share of the search: its baby steps, the full giant sweep."""
    table = build_baby_table(curve, A, start, end)
    return giant_steps(curve, A, B, m, table)


def _worker(idx, curve, A, B, m, start, end, results):
    try:
        found = search_chunk(curve, A, B, m, start, end)
    except Exception:
        results.put((idx, "error", traceback.format_exc()))
        return
    results.put((idx, "ok", found))


def _terminate(workers: Iterable[multiprocessing.Process]) -> None:
    for proc in workers:
        if proc.is_alive():
            proc.terminate()


def _collect(results, workers: Dict[int, multiprocessing.Process]) -> Optional[int]:
    pending = set(workers)
    while pending:
        try:
            idx, status, payload = results.get(timeout=POLL_INTERVAL)
        except queue.Empty:
            for idx in pending:
                code = workers[idx].exitcode
                if code is not None and code != 0:
                    raise WorkerError(f"BSGS worker {idx} exited with status {code} before reporting")
            continue

        pending.discard(idx)
        if status == "error":
            raise WorkerError(f"BSGS worker {idx} failed:\n{payload}")
        if payload is not None:
            logger.debug("Worker %d found the discrete log, %d workers still running", idx, len(pending))
            return payload
        logger.debug("Worker %d exhausted its slice", idx)

    return None


def baby_giant(max_bitwidth: int, a: Point, b: Point, num_threads: int,
               curve: TwistedEdwardsCurve = BABYJUBJUB, cancel_pending: bool = False) -> Optional[int]:
    """
    Solve b = p*a for 0 <= p < 2^(2*(max_bitwidth // 2)) using num_threads worker processes.

    Args:
        max_bitwidth: Bit width bound of the plaintext
        a: Base point
        b: Target point
        num_threads: Number of worker processes
        curve: Curve both points lie on
        cancel_pending: Terminate the remaining workers once an answer is found

    Returns:
        The discrete logarithm p, or None if no p in range satisfies b = p*a

    Raises:
        ValueError: if num_threads < 1
        WorkerError: if a worker fails instead of reporting
    """
    m = 1 << (max_bitwidth // 2)
    bounds = chunk_bounds(m, num_threads)
    logger.debug("BSGS: m=%d, %d workers, slices %s", m, num_threads, bounds)

    ctx = multiprocessing.get_context()
    results = ctx.Queue()
    workers: Dict[int, multiprocessing.Process] = {}
    for idx, (start, end) in enumerate(bounds):
        proc = ctx.Process(
            target=_worker,
            args=(idx, curve, a, b, m, start, end, results),
            name=f"bsgs-worker-{idx}",
            daemon=True,
        )
        proc.start()
        workers[idx] = proc

    try:
        return _collect(results, workers)
    except BaseException:
        _terminate(workers.values())
        raise
    finally:
        if cancel_pending:
            _terminate(workers.values())
