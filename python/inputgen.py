# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import random

example_count = 6

def zeroes(lengths):
    return {k: bytes(v) for k, v in lengths.items()}

def bitpositions(nbits, c):
    # Always include the first and last bit; the rest are fixed by the seed.
    r = random.Random(repr((nbits, c)))
    s = {0, nbits - 1}
    while len(s) < min(c, nbits):
        s.add(r.randrange(nbits))
    return sorted(s)

def generate_zero(lengths):
    yield zeroes(lengths), "All zero"

def generate_onebit(lengths):
    for k, v in lengths.items():
        if v == 0:
            continue
        for i in bitpositions(v * 8, example_count):
            d = zeroes(lengths)
            b = bytearray(v)
            b[i >> 3] |= 0x80 >> (i & 7)
            d[k] = bytes(b)
            yield d, f"Set bit {i} of {k}"

def generate_counting(lengths):
    for start in 0x00, 0x80, 0xf8:
        d = {k: bytes((start + j) & 0xff for j in range(v))
            for k, v in lengths.items()}
        yield d, f"Incrementing bytes from 0x{start:02x}"

def generate_repeated(lengths):
    r = random.Random(repr(sorted(lengths.items())))
    for _ in range(example_count):
        values = {k: r.randrange(0x100) for k in lengths}
        d = {k: bytes([values[k]]) * v for k, v in lengths.items()}
        yield d, "Repeated bytes: {}".format(" ".join(
            f"{k}: 0x{b:02x}" for k, b in values.items()))

def generate_random(lengths):
    for i in range(1, example_count + 1):
        r = random.Random(repr((sorted(lengths.items()), i)))
        d = {k: bytes(r.randrange(0x100) for _ in range(v))
            for k, v in lengths.items()}
        yield d, f"Random ({i:2})"

def generate_testinputs(lengths):
    yield from generate_zero(lengths)
    yield from generate_onebit(lengths)
    yield from generate_counting(lengths)
    yield from generate_repeated(lengths)
    yield from generate_random(lengths)
