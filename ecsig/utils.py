#!/usr/bin/env python3

# Copyright (C) 2024 The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities."""

from collections.abc import Iterable as IterableCollection
from typing import Iterable, Optional, Union

from ecsig.alias import Integer, Octets
from ecsig.exceptions import ECSigValueError

NoneOneOrMoreInt = Optional[Union[int, Iterable[int]]]

# weight of each byte position in int_from_concatenation
CONCATENATION_BASE = 1000

# larger integers are shown as hex-strings in error messages
HEX_THRESHOLD = 0xFFFFFFFF


def bytes_from_octets(octets: Octets, out_size: NoneOneOrMoreInt = None) -> bytes:
    """Return bytes from a hex-string, stripping leading/trailing spaces.

    If the input is not a string, then it goes untouched.
    Optionally, it also ensures required output size.
    """

    if isinstance(octets, str):  # hex string
        octets = bytes.fromhex(octets)

    if (
        out_size is None
        or isinstance(out_size, int)
        and len(octets) == out_size
        or isinstance(out_size, IterableCollection)
        and len(octets) in out_size
    ):
        return octets

    err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
    raise ECSigValueError(err_msg)


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 3735928559
    * -3735928559
    * "0xdeadbeef"
    * "-0xdeadbeef"
    * "deadbeef"
    * b'\xde\xad\xbe\xef'
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        if i.startswith("0x") or i.startswith("-0x"):
            return int(i, 16)
        i = bytes.fromhex(i)

    # must be bytes
    return int.from_bytes(i, "big", signed=False)


def hex_string(i: Integer) -> str:
    """Return a hex-string from many positive integer representations.

    Negative integers are not allowed.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise ECSigValueError(f"negative integer: {int_}")
    a_str = hex(int_)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, i - 8) : i]) for i in indx]
    return " ".join(lresult).upper()


def int_str(i: int) -> str:
    "Return the error message representation of an integer."
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"


def int_from_concatenation(octets: Octets) -> int:
    """Return the non-negative integer concatenating the input bytes.

    Each byte is a digit in base 1000, the most significant first:

        c = sum(octets[i] * 1000^(L-1-i)) for i in 0..L-1

    e.g. b"\\x01\\x02" is 1002, while the empty sequence is 0.

    This is not the usual big-endian (base 256) conversion:
    per-use secret generation, signing, and verification
    must all use this very same weighting to interoperate.
    """

    c = 0
    for byte in bytes_from_octets(octets):
        c = c * CONCATENATION_BASE + byte
    return c
