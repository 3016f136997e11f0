# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""CMAC (RFC4493, NIST SP800-38B) over any block cipher with an 8 or 16 byte block.

The cipher is anything with a `block_size` attribute and an
`encrypt(block)` method, such as the ECB objects made by `aes.new` and
`tdes.new`.
"""

import aes
import cipher

class InvalidBlockSize(ValueError):
    pass

_polynomial_constants = {8: 0x1b, 16: 0x87}

def polynomial_constant(block_size):
    try:
        return _polynomial_constants[block_size]
    except KeyError:
        raise InvalidBlockSize(
            f"CMAC needs a block size of 8 or 16 bytes, not {block_size}") from None

def xor(a, b):
    assert len(a) == len(b)
    i = int.from_bytes(a, byteorder='big') ^ int.from_bytes(b, byteorder='big')
    return i.to_bytes(len(a), byteorder='big')

def shifted(v):
    i = int.from_bytes(v, byteorder='big') << 1
    i &= (1 << (8 * len(v))) - 1
    return i.to_bytes(len(v), byteorder='big')

def double(v, rb):
    """Multiply by x in GF(2^n).

    Rb is folded in under a mask built from the top bit of `v`, so the
    reduction costs the same whatever that bit is.
    """
    d = bytearray(shifted(v))
    d[-1] ^= rb & -(v[0] >> 7)
    return bytes(d)

def padded(d, block_size):
    return d + b'\x80' + b'\0' * (block_size - len(d) - 1)

def gensubkeys(c):
    rb = polynomial_constant(c.block_size)
    l = c.encrypt(bytes(c.block_size))
    k1 = double(l, rb)
    return k1, double(k1, rb)

class CMACHash(object):
    """Incremental CMAC state over a keyed block cipher.

    Not safe for concurrent use; `reset` it to authenticate another message
    under the same key without deriving the subkeys again.
    """

    def __init__(self, c):
        self._cipher = c
        self._k1, self._k2 = gensubkeys(c)
        self.reset()

    @property
    def digest_size(self):
        return self._cipher.block_size

    def size(self):
        return self._cipher.block_size

    def block_size(self):
        return self._cipher.block_size

    def reset(self):
        self._x = bytes(self._cipher.block_size)
        self._buf = b''

    def _block(self, b):
        self._x = self._cipher.encrypt(xor(self._x, b))

    def write(self, data):
        data = memoryview(data).tobytes()
        bs = self._cipher.block_size
        d = self._buf + data
        # The last full block has to wait for finalize, which picks K1 or K2
        # depending on whether the message ends on a block boundary.
        i = 0
        while len(d) - i > bs:
            self._block(d[i:i + bs])
            i += bs
        self._buf = d[i:]
        return len(data)

    def finalize(self, prefix=b''):
        bs = self._cipher.block_size
        if len(self._buf) == bs:
            last = xor(self._buf, self._k1)
        else:
            last = xor(padded(self._buf, bs), self._k2)
        tag = self._cipher.encrypt(xor(last, self._x))
        return memoryview(prefix).tobytes() + tag

    def update(self, data):
        self.write(data)

    def digest(self):
        return self.finalize()

    def hexdigest(self):
        return self.finalize().hex()

    def copy(self):
        res = CMACHash.__new__(CMACHash)
        res._cipher = self._cipher
        res._k1, res._k2 = self._k1, self._k2
        res._x = self._x
        res._buf = self._buf
        return res

def new_with_cipher(c):
    return CMACHash(c)

def new(key):
    return new_with_cipher(aes.new(key))

def mac(key, message):
    h = new(key)
    h.write(message)
    return h.finalize()

class CMAC(cipher.Mac):
    def __init__(self):
        super().__init__()
        self.choose_variant(lambda v: True)

    def variant_name(self):
        return "{}_{}".format(self.name(), self._block.variant_name())

    def _blockciphers(self):
        for kl in [16, 24, 32]:
            a = aes.AES()
            a.set_keylen(kl)
            yield a

    def _lookup_block(self, v):
        for b in self._blockciphers():
            if b.variant == v:
                return b
        raise Exception(f"Unknown block cipher: {v}")

    def variants(self):
        for b in self._blockciphers():
            l = b.lengths()
            yield {
                "cipher": self.name(),
                "blockcipher": b.variant,
                "lengths": {"key": l["key"], "output": l["block"]}}

    def _setup_variant(self):
        self._block = self._lookup_block(self.variant["blockcipher"])

    def mac(self, message, key):
        h = new_with_cipher(self._block.keyed(key))
        h.write(message)
        return h.finalize()

    def test_input_lengths(self):
        bs = self.lengths()["output"]
        for mlen in 0, 1, bs - 1, bs, bs + 1, 2 * bs, 2 * bs + 8, 4 * bs:
            yield {"key": self.lengths()["key"], "message": mlen}
