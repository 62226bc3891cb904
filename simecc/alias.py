#!/usr/bin/env python3

# Copyright (C) 2022 The simecc developers
#
# This file is part of simecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of simecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Callable, NamedTuple, Optional, Union

# hex-string or bytes representation of an int
#
# e.g.:
# 7
# "0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798"
# "79BE667E F9DCBBAC 55A06295 CE870B07 029BFCDB 2DCE28D9 59F2815B 16F81798"
# b'\x07'
#
# use simecc.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]


class Point(NamedTuple):
    """Elliptic curve point in affine coordinates.

    Two points are equal if both coordinates are equal as integers:
    coordinates returned by the group law are always reduced mod p.
    """

    x: int
    y: int


class Infinity:
    """The point at infinity, i.e. the identity of the curve group.

    There is only one instance: use INF.
    """

    _instance: Optional["Infinity"] = None

    def __new__(cls) -> "Infinity":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "INF"

    def __reduce__(self) -> str:
        return "INF"


INF = Infinity()

# Affine point or the point at infinity
EcPoint = Union[Point, Infinity]

# None stands for an absent operand, which is not the same as INF
OptionalPoint = Optional[EcPoint]

# Binary operation on curve points, e.g. CurveGroup.add
PointOperation = Callable[[EcPoint, EcPoint], EcPoint]
