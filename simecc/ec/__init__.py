#!/usr/bin/env python3

# Copyright (C) 2022 The simecc developers
#
# This file is part of simecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of simecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module simecc.ec."""

from simecc.ec.curve import CURVES, Curve, g_at, mult, secp256k1
from simecc.ec.curve_group import CurveGroup, mult_aff, point_from

__all__ = [
    "CURVES",
    "Curve",
    "g_at",
    "mult",
    "secp256k1",
    "CurveGroup",
    "mult_aff",
    "point_from",
]
