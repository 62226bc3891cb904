#!/usr/bin/env python3

# Copyright (C) 2022 The simecc developers
#
# This file is part of simecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of simecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve with a base point.

A Curve is a CurveGroup together with its generator G.
Domain parameters are stored as given:
the generator is not required to be on the curve
until assert_valid is called.
"""

from typing import Any, Dict, Mapping, Optional, Sequence, Type

from simecc.alias import EcPoint, Infinity, Integer, Point
from simecc.ec.curve_group import CurveGroup, mult_aff, point_from
from simecc.exceptions import SimECCTypeError, SimECCValueError
from simecc.utils import HEX_THRESHOLD, hex_string, int_from_integer, int_str


class Curve(CurveGroup):
    "Points of an elliptic curve over Fp, with a generator G."

    def __init__(
        self, p: Integer, a: Integer, b: Integer, G: Sequence[Integer]
    ) -> None:

        super().__init__(p, a, b)

        if isinstance(G, Infinity):
            raise SimECCValueError("INF point cannot be a generator")
        if not isinstance(G, Sequence) or isinstance(G, (str, bytes)):
            raise SimECCTypeError(f"Generator must be a sequence[int, int]: {G!r}")
        if len(G) != 2:
            raise SimECCValueError("Generator must be a sequence[int, int]")
        self.G = Point(int_from_integer(G[0]), int_from_integer(G[1]))

    def assert_valid(self) -> None:
        "Raise SimECCValueError if the generator is not on the curve."
        if not self.is_valid(self.G):
            raise SimECCValueError("Generator is not on the curve")

    def g_at(self, n: int) -> EcPoint:
        "Return n*G."
        return mult_aff(n, self.G, self)

    def __str__(self) -> str:
        result = super().__str__()
        if self.p > HEX_THRESHOLD:
            result += f"\n x_G = {hex_string(self.G.x)}"
            result += f"\n y_G = {hex_string(self.G.y)}"
        else:
            result += f"\n x_G = {self.G.x}"
            result += f"\n y_G = {self.G.y}"
        return result

    def __repr__(self) -> str:
        result = f"Curve({int_str(self.p)}, {int_str(self.a)}, {int_str(self.b)}"
        result += f", ({int_str(self.G.x)}, {int_str(self.G.y)}))"
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        return super().__eq__(other) and self.G == other.G

    def __hash__(self) -> int:
        return hash((self.p, self.a, self.b, self.G))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "p": hex(self.p),
            "a": hex(self.a),
            "b": hex(self.b),
            "G": [hex(self.G.x), hex(self.G.y)],
        }

    @classmethod
    def from_dict(cls: Type["Curve"], dict_: Mapping[str, Any]) -> "Curve":
        try:
            return cls(dict_["p"], dict_["a"], dict_["b"], dict_["G"])
        except KeyError as e:
            raise SimECCValueError(f"missing curve parameter: {e}") from e


# SEC 2 v.2, section 2.4.1
secp256k1 = Curve(
    "0xFFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE FFFFFC2F",
    0,
    7,
    (
        "0x79BE667E F9DCBBAC 55A06295 CE870B07 029BFCDB 2DCE28D9 59F2815B 16F81798",
        "0x483ADA77 26A3C465 5DA4FBFC 0E1108A8 FD17B448 A6855419 9C47D08F FB10D4B8",
    ),
)

CURVES: Dict[str, Curve] = {"secp256k1": secp256k1}


def mult(m: int, Q: Optional[EcPoint] = None, ec: Curve = secp256k1) -> EcPoint:
    """Elliptic curve scalar multiplication.

    If Q is not given, the curve generator is used.
    The point is not checked to be on the curve.
    """

    Q = ec.G if Q is None else point_from(Q)
    return mult_aff(m, Q, ec)


def g_at(n: int, ec: Curve = secp256k1) -> EcPoint:
    "Return n*G, G being the curve generator."
    return ec.g_at(n)
