#!/usr/bin/env python3

# Copyright (C) 2024 The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions."""

import hashlib

from ecsig.alias import HashF, Octets
from ecsig.utils import bytes_from_octets


def reduce_to_hlen(msg: Octets, hf: HashF = hashlib.sha256) -> bytes:
    """Return the hf digest of the message, i.e. the value to be signed."""
    msg = bytes_from_octets(msg)
    h = hf()
    h.update(msg)
    return bytes(h.digest())
