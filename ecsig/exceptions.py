#!/usr/bin/env python3

# Copyright (C) 2024 The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

They discriminate between Exceptions being raised by ecsig
and those raised by other codebase.

Each one derives from ValueError, TypeError, or RuntimeError,
so users may just deal with the regular builtin exceptions.
"""


class ECSigValueError(ValueError):
    pass


class ECSigTypeError(TypeError):
    pass


class ECSigRuntimeError(RuntimeError):
    pass


class ScalarRangeError(ECSigValueError):
    """A scalar (private key or nonce) is not in 1..n-1.

    When raised while deriving a per-use secret
    it signals an arithmetic defect: it must not be retried.
    """


class RandomSourceError(ECSigRuntimeError):
    """The cryptographically secure random source failed."""


class DegenerateSignatureError(ECSigRuntimeError):
    """A signature component r or s has been computed as zero.

    Signing again with a fresh nonce is safe.
    """
