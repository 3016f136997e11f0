# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

class Cipher(object):
    """Something with a family of variants, each fixing its lengths."""

    def name(self):
        return type(self).__name__

    @property
    def variant(self):
        return self._variant

    def _setup_variant(self):
        pass

    @variant.setter
    def variant(self, value):
        if value not in self.variants():
            raise Exception(f"Not a variant of {self.name()}: {value}")
        self._variant = value
        self._setup_variant()

    def choose_variant(self, criterion):
        for v in self.variants():
            if criterion(v):
                self.variant = v
                return
        raise Exception(f"No {self.name()} variant matching criterion")

    def lengths(self):
        return self.variant["lengths"]

class Blockcipher(Cipher):
    """A block cipher family.

    Subclasses provide `variants()` and `_new(key)`, which must return a keyed
    object with a `block_size` attribute and `encrypt(block)`; pycryptodomex
    ECB objects are exactly that.
    """

    def set_keylen(self, k):
        self.choose_variant(lambda v: v["lengths"]["key"] == k)

    def variant_name(self):
        return "{}{}".format(self.name(), self.lengths()['key'] * 8)

    def keyed(self, key):
        assert len(key) == self.lengths()['key']
        return self._new(key)

class Mac(Cipher):
    def make_testvector(self, input, description):
        return {
            "cipher": self.variant,
            "description": description,
            "input": input,
            "mac": self.mac(**input),
        }

    def check_testvector(self, tv):
        self.variant = tv["cipher"]
        assert tv["mac"] == self.mac(**tv["input"]), tv["description"]
