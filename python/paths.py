# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import pathlib

_file = pathlib.Path(__file__).resolve()

top = _file.parent.parent

test_vectors = top / "test_vectors"
