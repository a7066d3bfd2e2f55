#!/usr/bin/env python3
"""
Benchmark: integer primitives, normalization and arithmetic on raw fractions.

"like" runs keep denominators equal (fast path), "unlike" runs do not.
"""

import logging
import sys
import timeit
sys.path.append('.')

from rawfrac.frac import F, norm
from rawfrac.utils import gcd, lcm

logging.basicConfig(level=logging.INFO)

COUNT = 10 ** 5


def bench_gcd():
    for i in range(COUNT):
        gcd(i, (i + 199) * 3 % 211)


def bench_lcm():
    for i in range(COUNT):
        lcm(i, (i + 199) * 3 % 211)


def bench_norm_like():
    for i in range(COUNT):
        d = i + 2
        norm(F(2, d), F(i, d))


def bench_norm_unlike():
    for i in range(COUNT):
        d = i + 2
        norm(F(2, d), F(d, 2))


def bench_norm_to_like():
    for i in range(COUNT):
        d = i + 2
        F(2, d).norm_to(F(i, d))


def bench_norm_to_unlike():
    for i in range(COUNT):
        d = i + 2
        F(2, d).norm_to(F(d, 2))


def bench_reduce():
    for i in range(COUNT):
        F(i + 2, i % 10 + 2).reduce()


def bench_sub_like():
    for i in range(1, COUNT):
        F(3, 17).sub(F(i, 17))


def bench_sub_unlike():
    for i in range(1, COUNT):
        F(3, 17).sub(F(1, i))


def bench_div():
    for i in range(1, COUNT):
        F(3, 17).div(F(i, 23))


def bench_inv():
    for i in range(-COUNT // 2, COUNT // 2):
        F(i, 17).inv()


if __name__ == "__main__":
    benches = [(name, func) for name, func in globals().items() if name.startswith('bench_')]
    for name, func in benches:
        seconds = timeit.timeit(func, number=1)
        logging.info('%s: %.3fs, %.0f ns/op', name[len('bench_'):], seconds, seconds / COUNT * 1e9)
