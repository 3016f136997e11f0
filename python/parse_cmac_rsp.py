# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import cmac
import paths

def parse_rsp(fn):
    """Yield each "Key = value" group of a CAVP .rsp file as a dict."""
    stanza = ""
    with fn.open() as f:
        d = {}
        for l in f:
            l = l.strip()
            if not l or l[0] in "#[":
                if d:
                    d.update(file=fn.name, stanza=stanza)
                    yield d
                d = {}
                if l.startswith("["):
                    stanza = l
            else:
                if "=" not in l:
                    raise Exception(f"{fn.name}: malformed line: {l}")
                k, v = l.split("=", 1)
                d[k.strip()] = v.strip()
        if d:
            d.update(file=fn.name, stanza=stanza)
            yield d

def rsp_files(p=None):
    if p is None:
        p = paths.test_vectors / "other" / "cmac"
    return sorted(p.glob("*.rsp"))

def test_vectors(x, p=None):
    for fn in rsp_files(p):
        for d in parse_rsp(fn):
            key = bytes.fromhex(d["Key"])
            if int(d["Klen"]) != len(key):
                raise Exception(f"{fn.name} {d['stanza']} {d['Count']}: Klen mismatch")
            x.choose_variant(lambda v: v["lengths"]["key"] == len(key))
            yield {
                'cipher': x.variant,
                'description': f"{d['file']} {d['stanza']} {d['Count']}",
                'input': {'key': key,
                    'message': bytes.fromhex(d["Msg"])[:int(d["Mlen"])]},
                'mac': bytes.fromhex(d["Mac"]),
                'tlen': int(d["Tlen"]),
            }

def check_testvector(x, tv):
    x.variant = tv["cipher"]
    got = x.mac(**tv["input"])[:tv["tlen"]]
    assert got == tv["mac"], f"{tv['description']}: expected {tv['mac'].hex()} got {got.hex()}"

def run_test(p=None):
    x = cmac.CMAC()
    count = 0
    for tv in test_vectors(x, p):
        check_testvector(x, tv)
        count += 1
    return count
