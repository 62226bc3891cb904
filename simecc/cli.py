#!/usr/bin/env python3

# Copyright (C) 2022 The simecc developers
#
# This file is part of simecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of simecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Command line demo of the simecc encryption scheme.

The private key is taken from the command line, from the JSON context
configuration, or else read from a line of input;
the curve is secp256k1, unless a JSON context configuration is given.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from simecc import __version__
from simecc.ec.curve import secp256k1
from simecc.ecc import ECC
from simecc.exceptions import SimECCValueError
from simecc.utils import int_from_integer, point_str

logger = logging.getLogger(__name__)

MESSAGE_MULTIPLE = 7


def parse_key(text: str) -> int:
    "Return the key from its decimal (or 0x-prefixed hex) text."

    text = text.strip()
    if text.lower().lstrip("-").startswith("0x"):
        return int_from_integer(text)
    try:
        return int(text, 10)
    except ValueError as e:
        raise SimECCValueError(f"invalid key: '{text}'") from e


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simecc", description="Elliptic curve point encryption demo"
    )
    parser.add_argument("-k", "--key", help="private key (read from stdin if missing)")
    parser.add_argument("-c", "--config", help="JSON curve context configuration")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def main(
    argv: Optional[List[str]] = None,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    print("Hello!\nWelcome to simECC..", file=stdout)

    ec = secp256k1
    key: Optional[int] = None
    if args.config:
        try:
            with open(args.config, "r", encoding="ascii") as file_:
                config = ECC.from_json(file_.read())
        except (OSError, ValueError, KeyError, TypeError) as e:
            parser.error(f"invalid configuration: {e}")
        ec, key = config.ec, config.k

    key_text = args.key
    if key_text is None and key is None:
        print("Please enter your private key:", file=stdout)
        key_text = stdin.readline()
        if not key_text:
            parser.error("failure to read key")
    try:
        if key_text is not None:
            key = parse_key(key_text)
        ctx = ECC(ec, key, check_validity=True)
    except SimECCValueError as e:
        parser.error(str(e))

    logger.debug("deriving public key")
    pub_k = ctx.public_key()
    m = ctx.g_at(MESSAGE_MULTIPLE)

    print(ctx.is_valid(m), file=stdout)
    print(point_str(m), file=stdout)
    print(point_str(ctx.decrypt(ctx.encrypt(m, pub_k))), file=stdout)
    return 0
