# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import Cryptodome.Cipher.AES

import cipher

def new(key):
    """AES-ECB keyed with `key`; pycryptodomex rejects bad key lengths."""
    return Cryptodome.Cipher.AES.new(key, Cryptodome.Cipher.AES.MODE_ECB)

class AES(cipher.Blockcipher):
    def __init__(self):
        super().__init__()
        self.set_keylen(16)

    def variants(self):
        for kl in [16, 24, 32]:
            yield {
                'cipher': 'AES',
                'lengths': {
                    'block': 16,
                    'key': kl
                }
            }

    def _new(self, key):
        return new(key)
