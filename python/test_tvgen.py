# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import json

import pytest

import cmac
import inputgen
import tvgen

def test_variants():
    x = cmac.CMAC()
    names = []
    for v in x.variants():
        x.variant = v
        names.append(x.variant_name())
    assert names == ["CMAC_AES128", "CMAC_AES192", "CMAC_AES256"]

def test_unknown_variant():
    x = cmac.CMAC()
    with pytest.raises(Exception):
        x.variant = {"cipher": "CMAC", "lengths": {"key": 8, "output": 8}}

def test_inputs_are_deterministic():
    lengths = {"key": 16, "message": 17}
    first = list(inputgen.generate_testinputs(lengths))
    assert first == list(inputgen.generate_testinputs(lengths))
    for d, _ in first:
        assert {k: len(v) for k, v in d.items()} == lengths

def test_empty_message_inputs():
    lengths = {"key": 16, "message": 0}
    for d, _ in inputgen.generate_testinputs(lengths):
        assert d["message"] == b''
    onebit = list(inputgen.generate_onebit(lengths))
    assert len(onebit) == inputgen.example_count
    for d, _ in onebit:
        assert sum(bin(b).count("1") for b in d["key"]) == 1

def test_repeated_inputs():
    lengths = {"key": 16, "message": 33}
    repeated = list(inputgen.generate_repeated(lengths))
    assert len(repeated) == inputgen.example_count
    for d, description in repeated:
        assert description.startswith("Repeated bytes: ")
        for k, v in d.items():
            assert len(v) == lengths[k]
            assert len(set(v)) == 1

def test_hex_encoding():
    tv = {"input": {"key": b'\x01\x02'}, "mac": b'\xff', "description": "x"}
    h = tvgen.tohex(tv)
    assert h == {"input": {"key_hex": "0102"}, "mac_hex": "ff", "description": "x"}
    assert tvgen.fromhex(h) == tv
    with pytest.raises(Exception):
        tvgen.tohex({"mac_hex": "00"})

def test_write_and_check(tmp_path, capsys):
    x = cmac.CMAC()
    tvgen.write_tests(x, tmp_path)
    files = sorted(p.name for p in (tmp_path / "CMAC").iterdir())
    assert files == ["CMAC_AES128.json", "CMAC_AES192.json", "CMAC_AES256.json"]
    assert tvgen.check_tests(cmac.CMAC(), tmp_path, False) > 0
    assert "Writing:" in capsys.readouterr().out

def test_check_detects_bad_mac(tmp_path):
    x = cmac.CMAC()
    tvgen.write_tests(x, tmp_path)
    p = tmp_path / "CMAC" / "CMAC_AES128.json"
    with p.open() as f:
        tvs = json.load(f)
    tvs[3]["mac_hex"] = "00" * 16
    with p.open("w") as f:
        json.dump(tvs, f)
    with pytest.raises(AssertionError):
        tvgen.check_tests(cmac.CMAC(), tmp_path, False)
