#!/usr/bin/env python3
#
# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import argparse
import pathlib
import sys
import time

import aes
import cmac
import parse_cmac_rsp
import paths
import tdes
import tvgen

ciphers = {
    'aes': aes.new,
    'tdes': tdes.new,
}

def fail(msg):
    sys.stderr.write(f'Error: {msg}\n')
    sys.exit(1)

def parse_key(s):
    try:
        return bytes.fromhex(s)
    except ValueError:
        fail(f'Key is not hex: {s!r}')

def mac_stream(h, f):
    while True:
        data = f.read(4096)
        if not data:
            break
        h.write(data)
    return h.finalize()

def do_mac(args):
    key = parse_key(args.key)
    try:
        h = cmac.new_with_cipher(ciphers[args.cipher](key))
    except ValueError as ex:
        fail(str(ex))
    if args.file is None:
        tag = mac_stream(h, sys.stdin.buffer)
    else:
        with args.file.open("rb") as f:
            tag = mac_stream(h, f)
    print(tag.hex())

def do_generate(args):
    tvgen.write_tests(cmac.CMAC(), args.out)

def do_check(args):
    n = parse_cmac_rsp.run_test()
    print(f'{n} known-answer vectors OK')
    if (args.dir / cmac.CMAC.__name__).is_dir():
        n = tvgen.check_tests(cmac.CMAC(), args.dir, args.verbose)
        print(f'{n} generated vectors OK')

def do_benchmark(args):
    buf = bytes(args.size)
    h = cmac.new(bytes(16))
    start = time.perf_counter()
    for _ in range(args.iterations):
        h.reset()
        h.write(buf)
        h.finalize()
    elapsed = time.perf_counter() - start
    total = args.size * args.iterations
    print(f'AES-128 CMAC: {total} bytes in {elapsed:.3f}s, '
          f'{total / elapsed / (1 << 20):.2f} MiB/s')

def main(argv=None):
    parser = argparse.ArgumentParser(description="""Compute AES or TDES
    CMAC tags, and generate or check CMAC test vectors.""")
    subparsers = parser.add_subparsers(dest='command', required=True)

    p = subparsers.add_parser('mac', help='print the CMAC of a file')
    p.add_argument('--key', required=True, help='key, in hex')
    p.add_argument('--cipher', choices=sorted(ciphers), default='aes',
                   help='block cipher to use')
    p.add_argument('file', nargs='?', type=pathlib.Path,
                   help='file to authenticate; standard input if omitted')
    p.set_defaults(func=do_mac)

    default_dir = paths.test_vectors / "ours"
    p = subparsers.add_parser('generate', help='write JSON test vectors')
    p.add_argument('--out', type=pathlib.Path, default=default_dir,
                   help='directory to write test vectors under')
    p.set_defaults(func=do_generate)

    p = subparsers.add_parser('check', help='check test vectors')
    p.add_argument('--dir', type=pathlib.Path, default=default_dir,
                   help='directory of generated test vectors')
    p.add_argument('--verbose', action='store_true',
                   help='print each vector as it passes')
    p.set_defaults(func=do_check)

    p = subparsers.add_parser('benchmark', help='time CMAC over a buffer')
    p.add_argument('--size', type=int, default=1 << 20,
                   help='message size in bytes')
    p.add_argument('--iterations', type=int, default=4,
                   help='number of messages to authenticate')
    p.set_defaults(func=do_benchmark)

    args = parser.parse_args(argv)
    args.func(args)

if __name__ == "__main__":
    main()
