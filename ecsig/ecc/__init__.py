#!/usr/bin/env python3

# Copyright (C) 2024 The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module ecsig.ecc."""

from ecsig.ecc.curve import CURVES, Curve, secp256k1, secp256r1
from ecsig.ecc.dsa import KeyPair, Sig, gen_keys, sign, sign_, verify, verify_
from ecsig.ecc.fips186_nonce import gen_secret

__all__ = [
    "CURVES",
    "Curve",
    "secp256k1",
    "secp256r1",
    "KeyPair",
    "Sig",
    "gen_keys",
    "sign",
    "sign_",
    "verify",
    "verify_",
    "gen_secret",
]
