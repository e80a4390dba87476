"""Taylor-series approximations of the matrix exponential.

Besides the plain serial sum, two work splits are provided that divide the
terms among a number of workers: a strided split, where worker r handles
terms r+1, r+1+p, r+1+2p, ..., and a block split, where each worker handles
one contiguous run of terms.  Summing every worker's partial sum and adding
the identity gives the full approximation.
"""

from __future__ import annotations

import math

from .matrix import Matrix


def _check_workers(num_procs: int) -> None:
    if num_procs < 1:
        raise ValueError("num_procs must be at least 1")


def taylor_sum(a: Matrix, n_terms: int) -> Matrix:
    """Return I + sum_{k=1..n_terms} A^k / k!, computed term by term."""
    total = Matrix.identity(a.size)
    term = Matrix.identity(a.size)
    for k in range(1, n_terms + 1):
        term = term * a * (1.0 / k)
        total = total + term
    return total


def strided_partial_sum(a: Matrix, rank: int, num_procs: int, n_terms: int) -> Matrix:
    """Sum the terms k = rank+1, rank+1+num_procs, ... not exceeding n_terms."""
    _check_workers(num_procs)
    local_sum = Matrix.zeros(a.size)

    a_step = a
    for _ in range(1, num_procs):
        a_step = a_step * a

    k_first = rank + 1
    if k_first > n_terms:
        return local_sum

    power = Matrix.identity(a.size)
    for _ in range(k_first):
        power = power * a
    factorial = 1.0
    for p in range(1, k_first + 1):
        factorial *= float(p)

    term = power * (1.0 / factorial)
    local_sum = local_sum + term

    for k_current in range(k_first, n_terms - num_procs + 1, num_procs):
        k_next = k_current + num_procs
        term = term * a_step
        denominator = 1.0
        for value in range(k_current + 1, k_next + 1):
            denominator *= float(value)
        if denominator == 0:
            raise ZeroDivisionError(
                f"rank {rank}: zero denominator between terms {k_current} and {k_next}"
            )
        term = term * (1.0 / denominator)
        local_sum = local_sum + term
    return local_sum


def strided_taylor_sum(a: Matrix, num_procs: int, n_terms: int) -> Matrix:
    """Combine the strided partial sums of all workers and add the identity."""
    _check_workers(num_procs)
    total = Matrix.zeros(a.size)
    for rank in range(num_procs):
        total = total + strided_partial_sum(a, rank, num_procs, n_terms)
    return total + Matrix.identity(a.size)


def block_range(n_terms: int, rank: int, num_procs: int) -> range:
    """Return the contiguous run of term indices (from 1) given to a worker."""
    _check_workers(num_procs)
    base, extra = divmod(n_terms, num_procs)
    if rank < extra:
        start = rank * (base + 1) + 1
        count = base + 1
    else:
        start = rank * base + extra + 1
        count = base
    if count <= 0:
        return range(0, 0)
    return range(start, start + count)


def jump_size(n_terms: int) -> int:
    """Return the stride used to skip ahead through the series: floor(sqrt(n)), at least 1."""
    return max(1, int(math.sqrt(float(n_terms))))


def block_partial_sum(a: Matrix, rank: int, num_procs: int, n_terms: int) -> Matrix:
    """Sum the terms of this worker's contiguous block."""
    terms = block_range(n_terms, rank, num_procs)
    jump = jump_size(n_terms)

    if jump == 1:
        a_jump = a
    else:
        a_jump = Matrix.identity(a.size)
        for _ in range(jump):
            a_jump = a_jump * a

    target = (terms.start if terms else 0) - 1
    term = Matrix.identity(a.size)
    if target > 0:
        k = 0
        for _ in range(target // jump):
            inverse = 1.0
            for offset in range(1, jump + 1):
                inverse /= float(k + offset)
            term = (term * a_jump) * inverse
            k += jump
        for _ in range(target % jump):
            k += 1
            term = (term * a) * (1.0 / float(k))

    local_sum = Matrix.zeros(a.size)
    for k in terms:
        term = (term * a) * (1.0 / float(k))
        local_sum = local_sum + term
    return local_sum


def block_taylor_sum(a: Matrix, num_procs: int, n_terms: int) -> Matrix:
    """Combine the block partial sums of all workers and add the identity."""
    _check_workers(num_procs)
    total = Matrix.zeros(a.size)
    for rank in range(num_procs):
        total = total + block_partial_sum(a, rank, num_procs, n_terms)
    return total + Matrix.identity(a.size)