#!/usr/bin/env python3

# Copyright (C) 2022 The simecc developers
#
# This file is part of simecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of simecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and functions.

Note that CurveGroup has no generator:
for the curve with a base point see the simecc.ec.curve module.
"""

import logging
from typing import Any, Optional

from simecc.alias import (
    INF,
    EcPoint,
    Infinity,
    Integer,
    OptionalPoint,
    Point,
    PointOperation,
)
from simecc.ec.number_theory import equal_mod, inverse, mod_inv
from simecc.exceptions import MissingOperandError, SimECCTypeError, SimECCValueError
from simecc.utils import HEX_THRESHOLD, hex_string, int_from_integer, int_str

logger = logging.getLogger(__name__)


def point_from(Q: Any) -> EcPoint:
    """Return the curve point (Point or INF) for the input.

    Sequences of two int are accepted as affine points;
    None (i.e. an absent operand) raises MissingOperandError.
    """

    if Q is None:
        raise MissingOperandError("missing point operand")
    if isinstance(Q, Infinity):
        return INF
    if isinstance(Q, Point):
        return Q
    if isinstance(Q, (tuple, list)) and len(Q) == 2:
        return Point(int(Q[0]), int(Q[1]))
    raise SimECCTypeError(f"not a point: {Q!r}")


class CurveGroup:
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity INF.
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.

    The group is defined by the point addition group law.
    """

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1

        p = int_from_integer(p)
        a = int_from_integer(a)
        b = int_from_integer(b)

        # Fermat test will do as _probabilistic_ primality test
        if p < 3 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise SimECCValueError(f"p is not prime: {int_str(p)}")

        self.p = p

        # field elements are signed integers: a and b are taken mod p
        a %= p
        b %= p
        if (4 * a * a * a + 27 * b * b) % p == 0:
            raise SimECCValueError("zero discriminant")
        self._a = a
        self._b = b

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    def __str__(self) -> str:
        result = "Curve"
        if self.p > HEX_THRESHOLD:
            result += f"\n p   = {hex_string(self.p)}"
        else:
            result += f"\n p   = {self.p}"

        if self._a > HEX_THRESHOLD or self._b > HEX_THRESHOLD:
            result += f"\n a   = {hex_string(self._a)}"
            result += f"\n b   = {hex_string(self._b)}"
        else:
            result += f"\n a   = {self._a}"
            result += f"\n b   = {self._b}"

        return result

    def __repr__(self) -> str:
        return f"CurveGroup({int_str(self.p)}, {int_str(self._a)}, {int_str(self._b)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurveGroup):
            return NotImplemented
        return (self.p, self._a, self._b) == (other.p, other._a, other._b)

    def __hash__(self) -> int:
        return hash((self.p, self._a, self._b))

    # field element helpers

    def reduce(self, x: int) -> int:
        return x % self.p

    def equal_mod(self, x: int, y: int) -> bool:
        return equal_mod(x, y, self.p)

    def inverse(self, x: int) -> Optional[int]:
        return inverse(x, self.p)

    # group law

    @staticmethod
    def apply(
        p1: OptionalPoint, p2: OptionalPoint, op: PointOperation
    ) -> OptionalPoint:
        """Apply the binary operation only if both operands are present.

        An absent operand (None) is propagated as an absent result.
        """

        if p1 is None or p2 is None:
            return None
        return op(p1, p2)

    def negate(self, Q: EcPoint) -> EcPoint:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """

        Q = point_from(Q)
        if isinstance(Q, Infinity):
            return INF
        return Point(Q.x % self.p, -Q.y % self.p)

    def add(self, Q1: EcPoint, Q2: EcPoint) -> EcPoint:
        """Return the sum of two points.

        The input points are not checked to be on the curve:
        use is_valid or require_valid for that.
        """

        Q1 = point_from(Q1)
        Q2 = point_from(Q2)
        if isinstance(Q2, Infinity):
            return Q1
        if isinstance(Q1, Infinity):
            return Q2

        if self.equal_mod(Q1.x, Q2.x):
            if self.equal_mod(Q1.y, Q2.y):
                return self.double(Q1)
            if self.equal_mod(Q1.y, -Q2.y):
                # opposite points
                return INF
            # not both on curve: the division below fails

        lam = (Q2.y - Q1.y) * mod_inv(Q2.x - Q1.x, self.p)
        x = (lam * lam - Q1.x - Q2.x) % self.p
        y = (lam * (Q1.x - x) - Q1.y) % self.p
        return Point(x, y)

    def double(self, Q: EcPoint) -> EcPoint:
        "Return the point doubled."

        Q = point_from(Q)
        if isinstance(Q, Infinity):
            return INF
        # tangent is vertical: 2-torsion point
        if Q.y % self.p == 0:
            return INF

        lam = (3 * Q.x * Q.x + self._a) * mod_inv(2 * Q.y, self.p)
        x = (lam * lam - Q.x - Q.x) % self.p
        y = (lam * (Q.x - x) - Q.y) % self.p
        return Point(x, y)

    def subtract(self, Q1: EcPoint, Q2: EcPoint) -> EcPoint:
        "Return Q1 - Q2, i.e. the sum of Q1 and the opposite of Q2."
        return self.add(Q1, self.negate(Q2))

    def _y2(self, x: int) -> int:
        # right hand side of the curve equation
        return ((x * x + self._a) * x + self._b) % self.p

    def is_valid(self, Q: EcPoint) -> bool:
        "Return True if the point satisfies the curve equation (mod p)."

        Q = point_from(Q)
        if isinstance(Q, Infinity):
            return True
        return self.equal_mod(Q.y * Q.y, self._y2(Q.x))

    def require_valid(self, Q: EcPoint) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_valid(Q):
            raise SimECCValueError("point not on curve")


def mult_aff(m: int, Q: EcPoint, ec: CurveGroup) -> EcPoint:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    affine coordinates.

    The input point is assumed to be on curve.
    It is not constant-time.
    """

    if m < 0:
        raise SimECCValueError(f"negative m: {hex(m)}")
    Q = point_from(Q)

    logger.debug("scalar multiplication with %d-bit scalar", m.bit_length())
    R: EcPoint = INF
    while m > 0:
        if m & 1:
            R = ec.add(R, Q)
        # the doubling part of 'double & add'
        Q = ec.double(Q)
        m >>= 1
    return R
