#!/usr/bin/env python3

# Copyright (C) 2024 The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve Digital Signature Algorithm (ECDSA).

Private keys and nonces are generated with extra random bits
according to FIPS PUB 186-4, appendix B.5.1
(see ecsig.ecc.fips186_nonce).

The message digest is turned into the integer z by
ecsig.utils.int_from_concatenation, i.e. weighting its bytes
as base 1000 digits: signatures are consistent with this library
only, even if the signing equation is the usual ECDSA one:

    s = (z + r*q) / k (mod n)

where q is the private key, k the nonce, and r = x_K (mod n),
x_K being the x-coordinate of K = k*G.

The curve is a capability: each operation only needs
the n and G attributes and the mult_base, mult, add, and is_on_curve
methods of the ec object (see ecsig.ecc.curve).
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import InitVar, dataclass, field
from hashlib import sha256

from ecsig.alias import HashF, Octets, Point, PrvKey, RandBytesF
from ecsig.ecc.curve import Curve, secp256r1
from ecsig.ecc.fips186_nonce import gen_secret
from ecsig.ecc.number_theory import fermat_inv
from ecsig.exceptions import (
    DegenerateSignatureError,
    ECSigRuntimeError,
    ECSigTypeError,
    ECSigValueError,
    ScalarRangeError,
)
from ecsig.hashes import reduce_to_hlen
from ecsig.utils import bytes_from_octets, int_from_concatenation, int_str

logger = logging.getLogger(__name__)

# fresh nonces to be tried before giving up on degenerate signatures
MAX_SIGN_ATTEMPTS = 16


def int_from_prv_key(prv_key: PrvKey, ec: Curve = secp256r1) -> int:
    """Return a verified-as-valid private key integer.

    The private key can be a native int
    or its n_size bytes big-endian representation (bytes or hex-string).
    A bool is not a private key.
    """

    if isinstance(prv_key, bool) or not isinstance(prv_key, (int, bytes, str)):
        raise ECSigTypeError(f"not a private key: {type(prv_key).__name__}")

    if isinstance(prv_key, int):
        q = prv_key
    else:
        try:
            q = int.from_bytes(bytes_from_octets(prv_key, ec.n_size), "big")
        except ValueError as e:
            raise ECSigValueError("not a private key") from e

    if not 0 < q < ec.n:
        raise ScalarRangeError("private key not in 1..n-1")
    return q


@dataclass(frozen=True)
class KeyPair:
    """ECDSA private/public key pair.

    The public key Q is q*G, G being the generator of the curve.
    The private key q is never shown in the representation.
    """

    # private key, 0 < q < ec.n
    q: int = field(repr=False)
    # public key, Q = q*G
    Q: Point
    ec: Curve = secp256r1
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        if not 0 < self.q < self.ec.n:
            raise ScalarRangeError("private key not in 1..n-1")
        if self.Q != self.ec.mult_base(self.q):
            raise ECSigValueError("public key does not match the private key")


@dataclass(frozen=True)
class Sig:
    """ECDSA signature.

    check_validity=False allows to wrap untrusted (r, s) values:
    verification will reject them if invalid.
    """

    # scalar, 0 < r < ec.n
    r: int
    # scalar, 0 < s < ec.n
    s: int
    ec: Curve = secp256r1
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        if not 0 < self.r < self.ec.n:
            raise ECSigValueError(f"scalar r not in 1..n-1: {int_str(self.r)}")

        if not 0 < self.s < self.ec.n:
            raise ECSigValueError(f"scalar s not in 1..n-1: {int_str(self.s)}")


def _msg_hash_bytes(msg_hash: Octets) -> bytes:
    msg_hash = bytes_from_octets(msg_hash)
    if not msg_hash:
        raise ECSigValueError("empty message digest")
    return msg_hash


def gen_keys(
    prv_key: PrvKey | None = None,
    ec: Curve = secp256r1,
    rand_bytes: RandBytesF = secrets.token_bytes,
) -> KeyPair:
    """Return a private/public key pair.

    If the private key is not provided,
    a random one is generated according to FIPS 186-4 B.5.1.
    """
    if prv_key is None:
        q = gen_secret(ec, rand_bytes)
    else:
        q = int_from_prv_key(prv_key, ec)

    Q = ec.mult_base(q)
    return KeyPair(q, Q, ec, check_validity=False)


def _sign_(z: int, q: int, nonce: int, ec: Curve) -> Sig:
    # Private function for testing purposes: it allows to explore
    # all possible nonces (for low-cardinality curves).
    # It assumes q and nonce in [1, n-1], while z is any non-negative int
    K = ec.mult_base(nonce)

    # mod n makes the x_K field element a scalar
    r = K[0] % ec.n
    if r == 0:  # r multiplies the private key
        raise DegenerateSignatureError("failed to sign: r = 0")

    s = (z + r * q) * fermat_inv(nonce, ec.n) % ec.n
    if s == 0:  # verification needs the inverse of s
        raise DegenerateSignatureError("failed to sign: s = 0")

    return Sig(r, s, ec)


def sign_(
    msg_hash: Octets,
    key: KeyPair,
    rand_bytes: RandBytesF = secrets.token_bytes,
    max_attempts: int = MAX_SIGN_ATTEMPTS,
) -> Sig:
    """Sign a message digest according to the ECDSA signature algorithm.

    A fresh nonce is generated for each signature:
    if the signature turns out to be degenerate (r = 0 or s = 0)
    another nonce is tried, up to max_attempts times,
    then DegenerateSignatureError is raised.
    """

    if max_attempts < 1:
        raise ECSigValueError(f"invalid max_attempts: {max_attempts}")

    z = int_from_concatenation(_msg_hash_bytes(msg_hash))
    ec = key.ec

    attempt = 1
    while True:
        nonce = gen_secret(ec, rand_bytes)
        try:
            return _sign_(z, key.q, nonce, ec)
        except DegenerateSignatureError as e:
            if attempt >= max_attempts:
                logger.warning(f"no valid signature after {attempt} nonces")
                raise
            logger.debug(f"{e}, nonce {attempt}/{max_attempts}: trying a new one")
            attempt += 1


def sign(
    msg: Octets,
    key: KeyPair,
    rand_bytes: RandBytesF = secrets.token_bytes,
    max_attempts: int = MAX_SIGN_ATTEMPTS,
    hf: HashF = sha256,
) -> Sig:
    """ECDSA signature of the hf digest of the message."""
    msg_hash = reduce_to_hlen(msg, hf)
    return sign_(msg_hash, key, rand_bytes, max_attempts)


def _assert_as_valid_(z: int, Q: Point, r: int, s: int, ec: Curve) -> None:
    # Private function for test/dev purposes

    w = fermat_inv(s, ec.n)
    u = z * w % ec.n
    v = r * w % ec.n
    # K = u*G + v*Q
    K = ec.add(ec.mult_base(u), ec.mult(v, Q))

    if K[1] == 0:
        raise ECSigRuntimeError("invalid (INF) key")

    if r != K[0] % ec.n:
        raise ECSigRuntimeError("signature verification failed")


def assert_as_valid_(msg_hash: Octets, pub_key: Point, sig: Sig) -> None:
    # Private function for test/dev purposes
    # It raises Errors, while verify should always return True or False

    sig.assert_valid()
    ec = sig.ec

    if not ec.is_on_curve(pub_key) or pub_key[1] == 0:
        raise ECSigValueError("not a valid public key")

    z = int_from_concatenation(_msg_hash_bytes(msg_hash))
    _assert_as_valid_(z, pub_key, sig.r, sig.s, ec)


def assert_as_valid(
    msg: Octets, pub_key: Point, sig: Sig, hf: HashF = sha256
) -> None:
    # Private function for test/dev purposes
    # It raises Errors, while verify should always return True or False
    msg_hash = reduce_to_hlen(msg, hf)
    assert_as_valid_(msg_hash, pub_key, sig)


def verify_(msg_hash: Octets, pub_key: Point, sig: Sig) -> bool:
    """ECDSA signature verification of a message digest.

    Raw (r, s) values should be wrapped as
    Sig(r, s, ec, check_validity=False).
    """
    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        assert_as_valid_(msg_hash, pub_key, sig)
    except Exception:  # pylint: disable=broad-except
        return False

    return True


def verify(msg: Octets, pub_key: Point, sig: Sig, hf: HashF = sha256) -> bool:
    """ECDSA signature verification of the hf digest of the message."""
    msg_hash = reduce_to_hlen(msg, hf)
    return verify_(msg_hash, pub_key, sig)
