#!/usr/bin/env python3

# Copyright (C) 2022 The simecc developers
#
# This file is part of simecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of simecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by simecc from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the simecc versions are derived.
"""


class SimECCValueError(ValueError):
    pass


class SimECCTypeError(TypeError):
    pass


class SimECCRuntimeError(RuntimeError):
    pass


class UndefinedInverseError(SimECCValueError):
    "A group law division hit a denominator equal to zero mod p."


class MissingOperandError(SimECCTypeError):
    "An absent point reached an operation that needs a point."
