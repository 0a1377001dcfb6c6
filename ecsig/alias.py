#!/usr/bin/env python3

# Copyright (C) 2024 The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Any, Callable, Tuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "e8684f29352ac0649b3d0eb5ba5312de89776aab9fb4e89ad7cbef0c64e7a284"
# "e8684f29 352ac064 9b3d0eb5 ba5312de 89776aab 9fb4e89a d7cbef0c 64e7a284"
#
# use ecsig.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for message digests and private keys
Octets = Union[bytes, str]

# hex-string or bytes representation of an int
Integer = Union[bytes, str, int]

# private key as native int
# or as big-endian n_size bytes (bytes or hex-string)
PrvKey = Union[int, bytes, str]

# Hash digest constructor: any hashlib constructor, e.g. hashlib.sha256
HashF = Callable[[], Any]

# Source of cryptographically secure random bytes:
# called with the number of bytes required, it returns exactly that many,
# e.g. secrets.token_bytes
RandBytesF = Callable[[int], bytes]

# Elliptic curve point in affine coordinates.
# Warning: to make Point a NamedTuple would slow down the code
Point = Tuple[int, int]

# Note that the infinity point in affine coordinates is INF = (int, 0)
# (no affine point has y=0 coordinate in a group of prime order).
# It can be checked with 'INF[1] == 0'
# The x-coordinate is arbitrary: 5 is preferred
# because it is not a valid x-coordinate in secp256k1
INF = 5, 0

# Elliptic curve point in Jacobian coordinates.
JacPoint = Tuple[int, int, int]

# Infinity point in Jacobian coordinates is INF = (int, int, 0).
# It can be checked with 'INF[2] == 0'
INFJ = 7, 0, 0
