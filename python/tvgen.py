# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import json

import inputgen

def tohex(o):
    """bytes values become hex strings, under their key plus "_hex"."""
    if isinstance(o, dict):
        res = {}
        for k, v in o.items():
            if k.endswith("_hex"):
                raise Exception(f"Disallowed key {k}: keys ending _hex are reserved")
            if isinstance(v, bytes):
                res[k + "_hex"] = v.hex()
            else:
                res[k] = tohex(v)
        return res
    if isinstance(o, list):
        return [tohex(i) for i in o]
    return o

def fromhex(o):
    if isinstance(o, dict):
        return {k[:-4] if k.endswith("_hex") else k:
            bytes.fromhex(v) if k.endswith("_hex") else fromhex(v)
            for k, v in o.items()}
    if isinstance(o, list):
        return [fromhex(i) for i in o]
    return o

def generate_testvectors(mac):
    for lengths in mac.test_input_lengths():
        for tv, d in inputgen.generate_testinputs(lengths):
            yield mac.make_testvector(tv, f"{d}, {lengths['message']} byte message")

def write_tests(mac, path):
    d = path / mac.name()
    d.mkdir(parents=True, exist_ok=True)
    for v in mac.variants():
        mac.variant = v
        p = d / "{}.json".format(mac.variant_name())
        print(f"Writing: {p}")
        with p.open("w") as f:
            json.dump([tohex(tv) for tv in generate_testvectors(mac)], f, indent=4)

def read_tests(fn):
    with fn.open() as f:
        for tv in json.load(f):
            yield fromhex(tv)

def check_testvector(mac, tv, verbose):
    mac.check_testvector(tv)
    if verbose:
        print(f"OK: {tv['description']}")

def check_tests(mac, path, verbose):
    count = 0
    for fn in sorted((path / mac.name()).iterdir()):
        print(f"======== {fn.name} ========")
        for tv in read_tests(fn):
            check_testvector(mac, tv, verbose)
            count += 1
    return count
