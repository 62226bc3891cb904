#!/usr/bin/env python3

# Copyright (C) 2022 The simecc developers
#
# This file is part of simecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of simecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve context and point encryption scheme.

ECC binds the curve domain parameters (a, b, p, G)
to a scalar k, used both as private key
and as blinding factor of the ElGamal-style encryption:

* public key: k*G
* encrypt(M, Pub) = M + k*Pub
* decrypt(C) = k*C

Note that, as the same scalar is used for both roles,
decrypt is not the inverse of encrypt:
the two parties must coordinate their scalar usage
to recover the message point.

ECC is immutable, so multiple contexts can be used
in the same process, also concurrently.
Its JSON representation (to_json/from_json) is the way
a context is configured from file: all integers are hex-strings.
"""

import logging
from dataclasses import InitVar, dataclass, field
from typing import Optional, Sequence

from dataclasses_json import DataClassJsonMixin, config

from simecc.alias import EcPoint, Integer, OptionalPoint, Point, PointOperation
from simecc.ec.curve import Curve
from simecc.ec.curve_group import mult_aff
from simecc.exceptions import MissingOperandError, SimECCValueError
from simecc.utils import int_from_integer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ECC(DataClassJsonMixin):
    ec: Curve = field(
        metadata=config(encoder=lambda v: v.to_dict(), decoder=Curve.from_dict),
    )
    # the scalar, i.e. the private key
    k: int = field(metadata=config(encoder=hex, decoder=int_from_integer))
    check_validity: InitVar[bool] = False

    def __post_init__(self, check_validity: bool) -> None:
        object.__setattr__(self, "k", int_from_integer(self.k))
        logger.debug("curve context on %r", self.ec)
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        self.ec.assert_valid()
        if self.k < 1:
            raise SimECCValueError(f"non positive scalar: {self.k}")

    @property
    def a(self) -> int:
        return self.ec.a

    @property
    def b(self) -> int:
        return self.ec.b

    @property
    def p(self) -> int:
        return self.ec.p

    @property
    def g(self) -> Point:
        return self.ec.G

    # modular arithmetic

    def reduce(self, x: int) -> int:
        return self.ec.reduce(x)

    def equal_mod(self, x: int, y: int) -> bool:
        return self.ec.equal_mod(x, y)

    def inverse(self, x: int) -> Optional[int]:
        return self.ec.inverse(x)

    # group law

    def apply(
        self, p1: OptionalPoint, p2: OptionalPoint, op: PointOperation
    ) -> OptionalPoint:
        return self.ec.apply(p1, p2, op)

    def add(self, p1: EcPoint, p2: EcPoint) -> EcPoint:
        return self.ec.add(p1, p2)

    def negate(self, p1: EcPoint) -> EcPoint:
        return self.ec.negate(p1)

    def subtract(self, p1: EcPoint, p2: EcPoint) -> EcPoint:
        return self.ec.subtract(p1, p2)

    def is_valid(self, p1: EcPoint) -> bool:
        return self.ec.is_valid(p1)

    def scalar_multiply(self, n: int, P: OptionalPoint) -> EcPoint:
        """Return n*P.

        n must be a positive integer and P must be present:
        the point is not checked to be on the curve.
        """

        if P is None:
            raise MissingOperandError("scalar multiplication of a missing point")
        if n < 1:
            raise SimECCValueError(f"non positive scalar: {n}")
        return mult_aff(n, P, self.ec)

    def g_at(self, n: int) -> EcPoint:
        return self.scalar_multiply(n, self.g)

    # encryption scheme

    def public_key(self) -> EcPoint:
        return self.g_at(self.k)

    def encrypt(self, m: EcPoint, pub_k: EcPoint) -> EcPoint:
        "Return the message point blinded by k*pub_k."

        c = self.apply(m, self.scalar_multiply(self.k, pub_k), self.add)
        if c is None:
            raise MissingOperandError("missing message point")
        return c

    def decrypt(self, c: EcPoint) -> EcPoint:
        return self.scalar_multiply(self.k, c)


def new_curve(
    a: Integer, b: Integer, p: Integer, generator: Sequence[Integer], scalar: Integer
) -> ECC:
    """Return the curve context for the given domain parameters and scalar.

    Integers can be given as int or hex-string (see simecc.alias.Integer):
    a malformed value raises SimECCValueError.
    """

    ec = Curve(p, a, b, generator)
    return ECC(ec, int_from_integer(scalar))


def public_key(ctx: ECC) -> EcPoint:
    "Return k*G for the curve context."
    return ctx.public_key()


def encrypt(ctx: ECC, m: EcPoint, pub_k: EcPoint) -> EcPoint:
    return ctx.encrypt(m, pub_k)


def decrypt(ctx: ECC, c: EcPoint) -> EcPoint:
    return ctx.decrypt(c)
