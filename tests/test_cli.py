#!/usr/bin/env python3

# Copyright (C) 2022 The simecc developers
#
# This file is part of simecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of simecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `simecc.cli` module."

import json
from io import StringIO
from pathlib import Path

import pytest

from simecc.cli import main, parse_key
from simecc.ec.curve import mult, secp256k1
from simecc.ecc import ECC
from simecc.exceptions import SimECCValueError
from simecc.utils import point_str
from tests.ec.test_curve import G7, low_card_curves


def test_parse_key() -> None:
    assert parse_key("7\n") == 7
    i = 123456789012345678901234567890
    assert parse_key(f" {i} ") == i
    assert parse_key("0x1f") == 31
    assert parse_key("-5") == -5

    for bad in ("", "seven", "7.0", "0xZ"):
        with pytest.raises(SimECCValueError):
            parse_key(bad)


def test_main_stdin() -> None:
    stdout = StringIO()
    assert main([], StringIO("7\n"), stdout) == 0
    lines = stdout.getvalue().splitlines()
    assert lines == [
        "Hello!",
        "Welcome to simECC..",
        "Please enter your private key:",
        "True",
        point_str(G7),
        # 7 * (7G + 7 * 7G)
        point_str(mult(392)),
    ]


def test_main_key_argument() -> None:
    stdout = StringIO()
    assert main(["--key", "0x07"], StringIO(), stdout) == 0
    lines = stdout.getvalue().splitlines()
    assert "Please enter your private key:" not in lines
    assert lines[2:] == ["True", point_str(G7), point_str(mult(392))]


def test_main_config(tmp_path: Path) -> None:
    ec = low_card_curves["ec23_31"]
    config = tmp_path / "ec23_31.json"
    config.write_text(ECC(ec, 3).to_json(), encoding="ascii")

    # the configured key is used, nothing is read from stdin
    stdout = StringIO()
    assert main(["-c", str(config)], StringIO("2\n"), stdout) == 0
    lines = stdout.getvalue().splitlines()
    assert lines[2:] == [
        "True",
        point_str(mult(7, None, ec)),
        # 3 * (7G + 3 * 3G)
        point_str(mult(48, None, ec)),
    ]

    # the key on the command line wins
    stdout = StringIO()
    assert main(["-c", str(config), "-k", "2", "-v"], StringIO(), stdout) == 0
    lines = stdout.getvalue().splitlines()
    # 2 * (7G + 2 * 2G)
    assert lines[-1] == point_str(mult(22, None, ec))


def test_main_errors(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([], StringIO(""), StringIO())
    assert excinfo.value.code == 2
    assert "failure to read key" in capsys.readouterr().err

    with pytest.raises(SystemExit):
        main(["-k", "not a key"], StringIO(), StringIO())
    assert "invalid key: " in capsys.readouterr().err

    with pytest.raises(SystemExit):
        main(["-k", "0"], StringIO(), StringIO())
    assert "non positive scalar: " in capsys.readouterr().err

    with pytest.raises(SystemExit):
        main(["-c", str(tmp_path / "missing.json"), "-k", "7"], StringIO(), StringIO())
    assert "invalid configuration: " in capsys.readouterr().err

    config = tmp_path / "bad_generator.json"
    bad = secp256k1.to_dict()
    bad["G"] = [bad["G"][0], hex(secp256k1.G.y + 1)]
    config.write_text(json.dumps({"ec": bad, "k": "0x7"}), encoding="ascii")
    with pytest.raises(SystemExit):
        main(["-c", str(config), "-k", "7"], StringIO(), StringIO())
    assert "Generator is not on the curve" in capsys.readouterr().err

    bad["G"] = 5
    config.write_text(json.dumps({"ec": bad, "k": "0x7"}), encoding="ascii")
    with pytest.raises(SystemExit) as excinfo:
        main(["-c", str(config)], StringIO(), StringIO())
    assert excinfo.value.code == 2
    err = capsys.readouterr().err
    assert "invalid configuration: " in err
    assert "Generator must be a sequence[int, int]" in err
