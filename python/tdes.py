# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import Cryptodome.Cipher.DES3

import cipher

def new(key):
    # DES3 also refuses keys that degenerate to single DES.
    return Cryptodome.Cipher.DES3.new(key, Cryptodome.Cipher.DES3.MODE_ECB)

class TDES(cipher.Blockcipher):
    def __init__(self):
        super().__init__()
        self.set_keylen(24)

    def variant_name(self):
        return "{}{}".format(self.name(), self.lengths()['key'] // 8)

    def variants(self):
        for kl in [16, 24]:
            yield {
                'cipher': 'TDES',
                'lengths': {
                    'block': 8,
                    'key': kl
                }
            }

    def _new(self, key):
        return new(key)
