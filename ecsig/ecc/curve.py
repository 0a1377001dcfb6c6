#!/usr/bin/env python3

# Copyright (C) 2024 The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve classes and named curves.

A Curve is the capability the signature scheme relies upon:

* p, n, nlen, n_size, and G attributes
* mult_base(m) -> m*G
* mult(m, Q) -> m*Q
* add(Q1, Q2) -> Q1+Q2
* is_on_curve(Q) -> bool

Any object exposing the same interface can replace it.

Named curves are loaded from the json files in the data folder:

* FIPS PUB 186-4 (NIST) curves
  https://nvlpubs.nist.gov/nistpubs/FIPS/NIST.FIPS.186-4.pdf
* SEC 2 v.2 curves
  http://www.secg.org/sec2-v2.pdf
"""

import json
from math import sqrt
from os import path
from typing import Dict

from ecsig.alias import Integer, JacPoint, Point
from ecsig.ecc.curve_group import CurveGroup, _mult, jac_from_aff, mult_aff
from ecsig.exceptions import ECSigValueError
from ecsig.utils import int_from_integer, int_str


class CurveSubGroup(CurveGroup):
    "Subgroup of the points of an elliptic curve over Fp generated by G."

    def __init__(self, p: Integer, a: Integer, b: Integer, G: Point) -> None:

        super().__init__(p, a, b)

        if len(G) != 2:
            raise ECSigValueError("Generator must a be a sequence[int, int]")
        self.G = (int_from_integer(G[0]), int_from_integer(G[1]))
        if not self.is_on_curve(self.G):
            raise ECSigValueError("Generator is not on the curve")
        self.GJ: JacPoint = jac_from_aff(self.G)

    def __repr__(self) -> str:
        result = super().__repr__()[:-1]
        result += f", ({int_str(self.G[0])}, {int_str(self.G[1])}))"
        return result


class Curve(CurveSubGroup):
    "Prime order subgroup of the points of an elliptic curve over Fp."

    def __init__(
        self,
        p: Integer,
        a: Integer,
        b: Integer,
        G: Point,
        n: Integer,
        cofactor: int,
        weakness_check: bool = True,
    ) -> None:

        super().__init__(p, a, b, G)
        n = int_from_integer(n)

        # 5. n must be prime
        if n < 2 or n % 2 == 0 or pow(2, n - 1, n) != 1:
            raise ECSigValueError(f"n is not prime: {int_str(n)}")
        self.n = n
        self.nlen = n.bit_length()
        self.n_size = (self.nlen + 7) // 8

        # Hasse theorem
        delta = int(2 * sqrt(self.p))
        if cofactor < 2 and not self.p + 1 - delta <= n <= self.p + 1 + delta:
            raise ECSigValueError(f"n not in p+1-delta..p+1+delta: {int_str(n)}")

        # 7. G ≠ INF, n*G = INF
        if self.G[1] == 0:
            raise ECSigValueError("INF point cannot be a generator")
        if mult_aff(n, self.G, self)[1] != 0:
            raise ECSigValueError(f"n is not the group order: {int_str(n)}")

        # 6. cofactor
        exp_cofactor = int(1 / n + delta / n + self.p / n)
        if cofactor != exp_cofactor:
            err_msg = f"invalid cofactor: {cofactor}, expected {exp_cofactor}"
            raise ECSigValueError(err_msg)
        self.cofactor = cofactor

        # 8. n ≠ p (anomalous curve)
        if n == self.p:
            raise ECSigValueError(f"n=p weak curve: {int_str(n)}")

        # 8. p^i % n ≠ 1 for all 1≤i<100 (MOV attack)
        if weakness_check:
            for i in range(1, 100):
                if pow(self.p, i, n) == 1:
                    raise UserWarning("weak curve")

    def __repr__(self) -> str:
        result = super().__repr__()[:-1]
        result += f", {int_str(self.n)}, {self.cofactor})"
        return result

    def mult_base(self, m: Integer) -> Point:
        "Return m*G, m being reduced mod n."
        m = int_from_integer(m) % self.n
        return self.aff_from_jac(_mult(m, self.GJ, self))

    def mult(self, m: Integer, Q: Point) -> Point:
        "Return m*Q, m being reduced mod n."
        self.require_on_curve(Q)
        m = int_from_integer(m) % self.n
        return self.aff_from_jac(_mult(m, jac_from_aff(Q), self))


datadir = path.join(path.dirname(__file__), "data")


def _load_curves(filename: str) -> Dict[str, Curve]:
    with open(path.join(datadir, filename), "r", encoding="ascii") as file_:
        curve_params = json.load(file_)
    return {
        ec_name: Curve(p, a, b, (x_G, y_G), n, cofactor)
        for ec_name, (p, a, b, (x_G, y_G), n, cofactor) in curve_params.items()
    }


# FIPS PUB 186-4, Digital Signature Standard (DSS), appendix D.1.2
NIST = _load_curves("ec_NIST.json")

# SEC 2 v.2 Koblitz curve used by bitcoin
SEC2v2 = _load_curves("ec_SEC2v2.json")

CURVES: Dict[str, Curve] = {}
CURVES.update(NIST)
CURVES.update(SEC2v2)

# a.k.a. P-256, the default curve
secp256r1 = CURVES["secp256r1"]
secp256k1 = CURVES["secp256k1"]
