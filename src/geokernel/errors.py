## exception taxonomy for geokernel

## Copyright (c) 2026 geokernel contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""exception classes raised by **geokernel**

Every error raised by the kernel derives from ``GeometryError``.  The
concrete classes also derive from the matching Python builtin, so code
that catches ``ValueError`` or ``NotImplementedError`` keeps working.

None of these are transient: they signal a violated precondition and
are never retried internally.
"""


class GeometryError(Exception):
    """root of the geokernel exception hierarchy"""


class InvalidArgumentError(GeometryError, ValueError):
    """a malformed argument, such as a ``None`` segment or a parameter
    outside the domain of an open curve"""


class SingularMatrixError(GeometryError, ArithmeticError):
    """a matrix that cannot be inverted"""


class UnsupportedOperationError(GeometryError, NotImplementedError):
    """an operation with no implementation for the given operands, such
    as concatenating incompatible transform representations"""


__all__ = [
    "GeometryError",
    "InvalidArgumentError",
    "SingularMatrixError",
    "UnsupportedOperationError",
]
