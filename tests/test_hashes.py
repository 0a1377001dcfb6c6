#!/usr/bin/env python3

# Copyright (C) 2024 The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecsig.hashes` module."

from hashlib import sha1, sha384

from ecsig.hashes import reduce_to_hlen


def test_reduce_to_hlen() -> None:

    msg = b"Take the red pill!"
    exp = "e8684f29352ac0649b3d0eb5ba5312de89776aab9fb4e89ad7cbef0c64e7a284"
    assert reduce_to_hlen(msg).hex() == exp
    # hex-string input
    assert reduce_to_hlen(msg.hex()).hex() == exp

    assert reduce_to_hlen(b"abc", sha1).hex() == "a9993e364706816aba3e25717850c26c9cd0d89d"
    assert len(reduce_to_hlen(b"", sha384)) == 48
