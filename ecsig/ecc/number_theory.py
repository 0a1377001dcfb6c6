#!/usr/bin/env python3

# Copyright (C) 2024 The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular inverse functions.

* fermat_inv: inverse modulo a prime as modular exponentiation,
  used by the signature scheme with the (prime) group order n
* mod_inv: inverse modulo any m using the Extended Euclidean Algorithm,
  used by the curve group arithmetic
"""

from typing import Tuple

from ecsig.exceptions import ECSigValueError
from ecsig.utils import int_str


def fermat_inv(d: int, prime: int) -> int:
    """Return the inverse of d (mod prime) as d^(prime-2) (mod prime).

    By Fermat's little theorem d^(prime-1) = 1 (mod prime),
    hence d^(prime-2) is the inverse of d.

    Preconditions, not checked: prime must be a prime
    and d must not be a multiple of it.
    If d = 0 (mod prime) the returned 0 is not an inverse at all.

    The square and multiply exponentiation is performed by the
    three-argument pow builtin: it is not guaranteed to be
    constant-time.
    """

    return pow(d, prime - 2, prime)


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b).

    based on Extended Euclidean Algorithm, see
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime."""

    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise ECSigValueError(f"No inverse for {int_str(a)} mod {int_str(m)}")
