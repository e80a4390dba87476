# parexp

A small pure-Python numerical toolkit with two computations:

* **The matrix exponential** `e^A` of a small square matrix, summed as the
  Taylor series `I + A + A²/2! + … + Aⁿ/n!`. Besides the plain sequential
  sum, the series can be divided among a number of workers:
  * *strided*: worker `r` of `p` sums the terms `k = r+1, r+1+p, r+1+2p, …`;
  * *block*: the terms `1..n` are cut into contiguous runs, and each worker
    skips ahead to the start of its run using a precomputed power `A^m`,
    where `m = max(1, floor(sqrt(n)))`.

  Adding every worker's partial sum and the identity gives the full
  approximation, equal to the sequential sum up to floating-point rounding.
* **Midpoint-rule integration** of a one-dimensional function, with the
  integrand `cot(x) / (ln(1 + sin x) · sin(1 + sin x))` on `(0, π)` as the
  built-in example. Points where that integrand is undefined, and points
  within `1e-12` of either end of `(0, π)`, contribute zero.

No third-party dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

### `parexp`

Computes `e^A` and prints the input matrix, the result and the elapsed time.

```
parexp [--method {serial,strided,block}] [--workers N] [--terms N]
```

* `--method serial` (default): sequential sum over the matrix
  `[[1, -1, -1], [1, 1, 0], [3, 0, 1]]`.
* `--method strided`: the same matrix, with the terms split among
  `--workers` workers in the strided way; the report also gives the number
  of workers.
* `--method block`: the matrix
  `[[0.1, 0.4, 0.2], [0.3, 0.0, 0.5], [0.6, 0.2, 0.1]]`, with the terms split
  into contiguous blocks among `--workers` workers.
* `--workers`: number of workers, at least 1 (default 1).
* `--terms`: number of series terms, not negative. The default is 5000 for
  `serial` and `strided`, and 100000000 for `block`; in pure Python that
  block default takes a long time, so pass a smaller `--terms` for a quick run.

### `parexp-integrate`

Integrates the built-in integrand over `[1e-6, π − 1e-6]` by the midpoint
rule and prints the interval, the number of steps, the step width, the result
and the elapsed time in milliseconds.

```
parexp-integrate [--steps N]
```

`--steps` is the number of subintervals, at least 1 (default 1000000).

## Library use

```python
from parexp.matrix import Matrix
from parexp.taylor import taylor_sum, strided_taylor_sum, block_taylor_sum

a = Matrix.filled(0.1, 3)

sequential = taylor_sum(a, 50)
strided = strided_taylor_sum(a, 4, 50)   # split over 4 workers
blocked = block_taylor_sum(a, 4, 50)

print(sequential.format("e^A (Result)"))
```

`Matrix` is an immutable square matrix built from rows
(`Matrix([[1, 2], [3, 4]])`); it rejects empty or non-square input with
`ValueError`. It supports `+` with another matrix of the same size and `*`
with either a matrix or a number (on either side). `Matrix.zeros(size)`,
`Matrix.filled(value, size)` and `Matrix.identity(size)` build the common
starting points (size 3 by default). `format(label)` renders rows in brackets
under a `label (NxN):` header; `format_plain(label)` renders unbracketed rows
under `label:` followed by a blank line.

The pieces one worker computes are available on their own:

```python
from parexp.taylor import (
    strided_partial_sum,
    block_range,
    block_partial_sum,
    jump_size,
)

part = strided_partial_sum(a, 0, 4, 50)   # worker 0 of 4
terms = block_range(50, 1, 4)             # range of term indices for worker 1 of 4
print(terms.start, terms.stop - 1)        # 14 26
chunk = block_partial_sum(a, 1, 4, 50)    # that worker's share of the sum
step = jump_size(50)                      # 7
```

A `num_procs` below 1 raises `ValueError`.

Integration:

```python
import math
from parexp.integrate import integrand, midpoint_integrate

value = midpoint_integrate(integrand, 1e-6, math.pi - 1e-6, 100_000)
```

`midpoint_integrate` accepts any callable taking and returning a float, and
raises `ValueError` if `n_steps` is below 1.

## What it does not do

The worker splits describe how the work is divided; they are evaluated one
worker after another in a single process. Nothing here runs workers in
parallel, on several processes, machines or a graphics card, and the reported
times are those of that single-process run.