#!/usr/bin/env python3

# Copyright (C) 2022 The simecc developers
#
# This file is part of simecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of simecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities."""

from typing import List

from simecc.alias import EcPoint, Integer, Point
from simecc.exceptions import SimECCValueError

HEX_THRESHOLD = 0xFFFFFFFF


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 3735928559
    * -3735928559
    * "0xdeadbeef"
    * "-0xdeadbeef"
    * "deadbeef"
    * "dead beef"
    * b'\xde\xad\xbe\xef'

    The binary representation is not allowed because there is no way to
    discriminate it from a valid hex-string
    (e.g. "0b11011110101011011011111011101111").

    A malformed string raises SimECCValueError.
    """

    if isinstance(i, bool):
        raise SimECCValueError(f"not an integer: {i}")

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        s = i.strip().lower()
        try:
            if s.startswith("0x") or s.startswith("-0x"):
                return int(s.replace(" ", ""), 16)
            i = bytes.fromhex(s)
        except ValueError as e:
            raise SimECCValueError(f"invalid integer: '{i}'") from e
        if not i:
            raise SimECCValueError("empty integer string")

    if isinstance(i, bytes):
        return int.from_bytes(i, "big", signed=False)

    raise SimECCValueError(f"not an integer: {i!r}")


def hex_string(i: Integer) -> str:
    """Return a hex-string from many positive integer representations.

    Negative integers are not allowed.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise SimECCValueError(f"negative integer: {int_}")
    a_str = hex(int_)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult: List[str] = [(a_str[max(0, i - 8) : i]) for i in indx]
    result = " ".join(lresult)
    return result.upper()


def int_str(i: int) -> str:
    "Return the decimal string for small ints, a quoted hex-string otherwise."
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"


def point_str(Q: EcPoint) -> str:
    "Render the point coordinates for display."

    if not isinstance(Q, Point):
        return "INF"
    return f"Point(x={hex(Q.x)}, y={hex(Q.y)})"
