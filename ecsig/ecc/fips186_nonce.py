#!/usr/bin/env python3

# Copyright (C) 2024 The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Per-use secret generation using extra random bits.

FIPS PUB 186-4, Digital Signature Standard (DSS), appendix B.5.1:

https://nvlpubs.nist.gov/nistpubs/FIPS/NIST.FIPS.186-4.pdf

The same process provides both private keys and per-message
secret numbers (ephemeral keys, hereafter designated as nonces).

Taking a random integer with the bit length of the group order n
modulo n would favour the smallest values:
drawing 64 additional random bits before the modular reduction
makes the resulting distribution statistically close to uniform
over [1, n-1].

The random source is injectable: any callable returning
the requested number of cryptographically secure random bytes.
A deterministic one makes signatures reproducible in tests,
but must never be used otherwise.
"""

import logging
import secrets

from ecsig.alias import RandBytesF
from ecsig.ecc.curve import Curve, secp256r1
from ecsig.exceptions import RandomSourceError, ScalarRangeError
from ecsig.utils import int_from_concatenation, int_str

logger = logging.getLogger(__name__)

# random bits drawn in addition to the bit length of n
EXTRA_BITS = 64


def random_bytes_size(nlen: int) -> int:
    "Return the number of random bytes to be drawn for a nlen-bit group order."
    # ceil((nlen + EXTRA_BITS) / 8)
    return (nlen + EXTRA_BITS + 7) // 8


def _secret_from_random_bytes_(random_bytes: bytes, ec: Curve) -> int:
    # B.5.1: c from the returned bits, then k = (c mod (n-1)) + 1
    c = int_from_concatenation(random_bytes)
    k = c % (ec.n - 1) + 1
    # always true unless the arithmetic above is broken
    if not 0 < k < ec.n:
        raise ScalarRangeError(f"secret not in 1..n-1: {int_str(k)}")
    return k


def gen_secret(
    ec: Curve = secp256r1, rand_bytes: RandBytesF = secrets.token_bytes
) -> int:
    """Return a random secret integer in the range [1, n-1].

    It is suitable as private key or as nonce.
    Failure of the random source is reported as RandomSourceError,
    without any retry.
    """

    size = random_bytes_size(ec.nlen)
    try:
        random_bytes = rand_bytes(size)
    except (OSError, NotImplementedError) as e:
        logger.error(f"random source failure: {e}")
        raise RandomSourceError("secure random source not available") from e

    if len(random_bytes) != size:
        err_msg = f"random source returned {len(random_bytes)} bytes"
        err_msg += f" instead of {size}"
        logger.error(err_msg)
        raise RandomSourceError(err_msg)

    return _secret_from_random_bytes_(random_bytes, ec)
