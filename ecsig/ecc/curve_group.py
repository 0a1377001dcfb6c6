#!/usr/bin/env python3

# Copyright (C) 2024 The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and scalar multiplication functions.

CurveGroup is the group of all the points of the curve:
for the prime order subgroup generated by G see the ecsig.ecc.curve module.
"""

from ecsig.alias import INF, INFJ, Integer, JacPoint, Point
from ecsig.ecc.number_theory import mod_inv
from ecsig.exceptions import ECSigValueError
from ecsig.utils import int_from_integer, int_str


def jac_from_aff(Q: Point) -> JacPoint:
    """Return the Jacobian representation of the affine point.

    The input point is assumed to be on curve.
    """
    return Q[0], Q[1], 1 if Q[1] else 0


class CurveGroup:
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity INF.
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.
    """

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1

        p = int_from_integer(p)
        a = int_from_integer(a)
        b = int_from_integer(b)

        # 1. p must be an odd prime (Fermat probabilistic test)
        if p < 3 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise ECSigValueError(f"p is not prime: {int_str(p)}")

        self.p = p

        # 2. a and b must be in [0, p-1]
        if not 0 <= a < p:
            raise ECSigValueError(f"a not in 0..p-1: {int_str(a)}")
        if not 0 <= b < p:
            raise ECSigValueError(f"b not in 0..p-1: {int_str(b)}")

        # 3. 4*a^3 + 27*b^2 ≠ 0 (mod p)
        if (4 * a * a * a + 27 * b * b) % p == 0:
            raise ECSigValueError("zero discriminant")
        self._a = a
        self._b = b

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int_str(self.p)}, {int_str(self._a)}, {int_str(self._b)})"

    def aff_from_jac(self, Q: JacPoint) -> Point:
        # point is assumed to be on curve
        if Q[2] == 0:
            return INF

        Z2 = Q[2] * Q[2]
        x = Q[0] * mod_inv(Z2, self.p)
        y = Q[1] * mod_inv(Z2 * Q[2], self.p)
        return x % self.p, y % self.p

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self.add_aff(Q1, Q2)

    def add_aff(self, Q: Point, R: Point) -> Point:
        # points are assumed to be on curve

        if R[1] == 0:
            return Q
        if Q[1] == 0:
            return R

        if R[0] == Q[0]:
            if R[1] == Q[1]:
                return self.double_aff(R)
            # opposite points
            return INF

        lam = (R[1] - Q[1]) * mod_inv(R[0] - Q[0], self.p)
        x = lam * lam - Q[0] - R[0]
        y = lam * (Q[0] - x) - Q[1]
        return x % self.p, y % self.p

    def double_aff(self, Q: Point) -> Point:
        # point is assumed to be on curve

        if Q[1] == 0:
            return INF

        lam = (3 * Q[0] * Q[0] + self._a) * mod_inv(2 * Q[1], self.p)
        x = lam * lam - Q[0] - Q[0]
        y = lam * (Q[0] - x) - Q[1]
        return x % self.p, y % self.p

    def add_jac(self, Q: JacPoint, R: JacPoint) -> JacPoint:
        # points are assumed to be on curve

        if Q[2] == 0:
            return R
        if R[2] == 0:
            return Q

        RZ2 = R[2] * R[2]
        RZ3 = RZ2 * R[2]
        QZ2 = Q[2] * Q[2]
        QZ3 = QZ2 * Q[2]

        M = Q[0] * RZ2 % self.p
        N = R[0] * QZ2 % self.p
        T = Q[1] * RZ3 % self.p
        U = R[1] * QZ3 % self.p

        if M == N:  # same affine x
            if T == U:
                return self.double_jac(Q)
            # opposite points
            return INFJ

        W = U - T
        V = N - M
        V2 = V * V
        V3 = V2 * V
        MV2 = M * V2

        X = (W * W - V3 - 2 * MV2) % self.p
        Y = (W * (MV2 - X) - T * V3) % self.p
        Z = (V * Q[2] * R[2]) % self.p
        return X, Y, Z

    def double_jac(self, Q: JacPoint) -> JacPoint:
        # point is assumed to be on curve

        QZ2 = Q[2] * Q[2]
        QY2 = Q[1] * Q[1]
        W = 3 * Q[0] * Q[0] + self._a * QZ2 * QZ2
        V = 4 * Q[0] * QY2
        X = W * W - 2 * V
        Y = W * (V - X) - 8 * QY2 * QY2
        Z = 2 * Q[1] * Q[2]
        return X % self.p, Y % self.p, Z % self.p

    def _y2(self, x: int) -> int:
        # no check that y2 actually has a square root
        return ((x * x + self._a) * x + self._b) % self.p

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve."""
        if len(Q) != 2:
            raise ECSigValueError("point must be a tuple[int, int]")
        if Q[1] == 0:
            return True
        if not 0 < Q[1] < self.p:
            raise ECSigValueError(f"y-coordinate not in 1..p-1: {int_str(Q[1])}")
        if not 0 <= Q[0] < self.p:
            raise ECSigValueError(f"x-coordinate not in 0..p-1: {int_str(Q[0])}")
        return self._y2(Q[0]) == (Q[1] * Q[1] % self.p)

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise ECSigValueError("point not on curve")


def mult_aff(m: int, Q: Point, ec: CurveGroup) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    'double & add' algorithm, 'right-to-left' binary decomposition
    of the m coefficient.

    The input point is assumed to be on curve and
    the m coefficient is assumed to have been reduced mod n
    if appropriate (e.g. cyclic groups of order n).
    """

    if m < 0:
        raise ECSigValueError(f"negative m: {hex(m)}")

    R = INF
    while m > 0:
        if m & 1:
            R = ec.add_aff(R, Q)
        m >>= 1
        Q = ec.double_aff(Q)
    return R


def mult_jac(m: int, Q: JacPoint, ec: CurveGroup) -> JacPoint:
    """Scalar multiplication of a curve point in Jacobian coordinates.

    'double & add' algorithm, 'right-to-left' binary decomposition
    of the m coefficient.
    The 'add' is always performed, even when the current bit is zero,
    so that the sequence of operations only depends on the bit length of m.

    The input point is assumed to be on curve and
    the m coefficient is assumed to have been reduced mod n
    if appropriate (e.g. cyclic groups of order n).
    """

    if m < 0:
        raise ECSigValueError(f"negative m: {hex(m)}")

    # R[0] is the running result, R[1] the discarded sum
    R = [INFJ, INFJ]
    R[not m & 1] = Q
    m >>= 1
    while m > 0:
        Q = ec.double_jac(Q)
        R[not m & 1] = ec.add_jac(R[0], Q)
        m >>= 1
    return R[0]


_mult = mult_jac
