#!/usr/bin/env python3

# Copyright (C) 2024 The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecsig.ecc.curve` module."

import secrets
from typing import Dict

import coincurve  # type: ignore
import pytest

from ecsig.alias import INF
from ecsig.ecc.curve import CURVES, NIST, SEC2v2, Curve, secp256k1, secp256r1
from ecsig.ecc.curve_group import mult_aff
from ecsig.exceptions import ECSigValueError

# test curves: very low cardinality
low_card_curves: Dict[str, Curve] = {}
# 13 % 4 = 1; 13 % 8 = 5
low_card_curves["ec13_11"] = Curve(13, 7, 6, (1, 1), 11, 1, False)
low_card_curves["ec13_19"] = Curve(13, 0, 2, (1, 9), 19, 1, False)
# 17 % 4 = 1; 17 % 8 = 1
low_card_curves["ec17_13"] = Curve(17, 6, 8, (0, 12), 13, 2, False)
low_card_curves["ec17_23"] = Curve(17, 3, 5, (1, 14), 23, 1, False)
# 19 % 4 = 3; 19 % 8 = 3
low_card_curves["ec19_13"] = Curve(19, 0, 2, (4, 16), 13, 2, False)
low_card_curves["ec19_23"] = Curve(19, 2, 9, (0, 16), 23, 1, False)
# 23 % 4 = 3; 23 % 8 = 7
low_card_curves["ec23_19"] = Curve(23, 9, 7, (5, 4), 19, 1, False)
low_card_curves["ec23_31"] = Curve(23, 5, 1, (0, 1), 31, 1, False)

all_curves: Dict[str, Curve] = {}
all_curves.update(low_card_curves)
all_curves.update(CURVES)


def test_exceptions() -> None:

    # good curve
    Curve(13, 0, 2, (1, 9), 19, 1, False)

    with pytest.raises(ECSigValueError, match="p is not prime: "):
        Curve(15, 0, 2, (1, 9), 19, 1, False)

    with pytest.raises(ECSigValueError, match="a not in 0..p-1: "):
        Curve(13, -1, 2, (1, 9), 19, 1, False)

    with pytest.raises(ECSigValueError, match="a not in 0..p-1: "):
        Curve(13, 13, 2, (1, 9), 19, 1, False)

    with pytest.raises(ECSigValueError, match="b not in 0..p-1: "):
        Curve(13, 0, -2, (1, 9), 19, 1, False)

    with pytest.raises(ECSigValueError, match="b not in 0..p-1: "):
        Curve(13, 0, 13, (1, 9), 19, 1, False)

    with pytest.raises(ECSigValueError, match="zero discriminant"):
        Curve(11, 7, 7, (1, 9), 19, 1, False)

    err_msg = "Generator must a be a sequence\\[int, int\\]"
    with pytest.raises(ECSigValueError, match=err_msg):
        Curve(13, 0, 2, (1, 9, 1), 19, 1, False)  # type: ignore

    with pytest.raises(ECSigValueError, match="Generator is not on the curve"):
        Curve(13, 0, 2, (2, 9), 19, 1, False)

    with pytest.raises(ECSigValueError, match="n is not prime: "):
        Curve(13, 0, 2, (1, 9), 20, 1, False)

    with pytest.raises(ECSigValueError, match="n not in "):
        Curve(13, 0, 2, (1, 9), 71, 1, False)

    with pytest.raises(ECSigValueError, match="INF point cannot be a generator"):
        Curve(13, 0, 2, INF, 19, 1, False)

    with pytest.raises(ECSigValueError, match="n is not the group order: "):
        Curve(13, 0, 2, (1, 9), 17, 1, False)

    with pytest.raises(ECSigValueError, match="invalid cofactor: "):
        Curve(13, 0, 2, (1, 9), 19, 2, False)

    with pytest.raises(UserWarning, match="weak curve"):
        Curve(11, 2, 7, (6, 9), 7, 2, True)


def test_named_curves() -> None:

    assert set(NIST) == {"secp192r1", "secp224r1", "secp256r1", "secp384r1", "secp521r1"}
    assert set(SEC2v2) == {"secp256k1"}
    assert set(CURVES) == set(NIST) | set(SEC2v2)
    assert secp256r1 is CURVES["secp256r1"]
    assert secp256k1 is CURVES["secp256k1"]

    for name, nlen, n_size in (
        ("secp192r1", 192, 24),
        ("secp224r1", 224, 28),
        ("secp256r1", 256, 32),
        ("secp384r1", 384, 48),
        ("secp521r1", 521, 66),
        ("secp256k1", 256, 32),
    ):
        ec = CURVES[name]
        assert ec.nlen == nlen
        assert ec.n_size == n_size
        assert ec.cofactor == 1
        assert ec.is_on_curve(ec.G)
        assert mult_aff(ec.n, ec.G, ec) == INF


def test_ec_repr() -> None:
    for ec in all_curves.values():
        ec_repr = repr(ec)
        if ec in low_card_curves.values():
            ec_repr = ec_repr[:-1] + ", False)"
        ec2 = eval(ec_repr)  # pylint: disable=eval-used # nosec
        assert str(ec) == str(ec2)


def test_mult_base() -> None:
    for ec in all_curves.values():

        assert ec.mult_base(0) == INF
        assert ec.mult_base(ec.n) == INF
        assert ec.mult_base(1) == ec.G
        # reduced mod n
        assert ec.mult_base(ec.n + 1) == ec.G
        assert ec.mult_base(-1) == (ec.G[0], ec.p - ec.G[1])

        # just a random point, not INF
        q = 1 + secrets.randbelow(ec.n - 1)
        Q = ec.mult_base(q)
        assert ec.is_on_curve(Q)
        assert Q == mult_aff(q, ec.G, ec)
        assert Q == ec.mult(q, ec.G)
        assert ec.add(Q, ec.G) == ec.mult_base(q + 1)


def test_mult() -> None:
    for ec in all_curves.values():

        # just a random point, not INF
        q = 1 + secrets.randbelow(ec.n - 1)
        Q = ec.mult_base(q)

        assert ec.mult(0, Q) == INF
        assert ec.mult(1, Q) == Q
        assert ec.mult(2, Q) == ec.add(Q, Q)
        assert ec.mult(ec.n - 1, Q) == (Q[0], ec.p - Q[1])
        assert ec.mult(3, INF) == INF

        # (v*q)*G = v*(q*G)
        v = 1 + secrets.randbelow(ec.n - 1)
        assert ec.mult(v, Q) == ec.mult_base(v * q)

        # off-curve point
        Q_off = Q[0], (Q[1] + 1) % ec.p
        if Q_off[1] != 0 and not ec.is_on_curve(Q_off):
            with pytest.raises(ECSigValueError, match="point not on curve"):
                ec.mult(v, Q_off)


def test_is_on_curve() -> None:
    for ec in all_curves.values():

        assert ec.is_on_curve(INF)
        assert ec.is_on_curve(ec.G)

        with pytest.raises(ECSigValueError, match="point must be a tuple"):
            ec.is_on_curve("not a point")  # type: ignore

        with pytest.raises(ECSigValueError, match="x-coordinate not in 0..p-1: "):
            ec.is_on_curve((ec.p, ec.G[1]))

        with pytest.raises(ECSigValueError, match="y-coordinate not in 1..p-1: "):
            ec.is_on_curve((ec.G[0], ec.p))


def test_libsecp256k1_pub_keys() -> None:
    ec = secp256k1
    for q in (1, 2, 3, ec.n - 1, 1 + secrets.randbelow(ec.n - 1)):
        Q = ec.mult_base(q)
        pub_key = coincurve.PrivateKey(q.to_bytes(32, "big")).public_key
        exp = b"\x04" + Q[0].to_bytes(32, "big") + Q[1].to_bytes(32, "big")
        assert pub_key.format(compressed=False) == exp
