## matrix transformations and object coordinate systems for dxfent

## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2024 dxfent contributors
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

from enum import Enum
from typing import Callable, Iterable, List

from dxfent.vectors import Vector3, epsilon, isgoodnum

## a matrix is represented as a list of four four-element rows.  In a
## matrix, vectors represent rows unless the transpose property is
## true.  A Vector3 passed to mul() is treated as a column point in the
## w=1 hyperplane.

## The object coordinate system (OCS) of a DXF entity is fully
## determined by its normal, using the "arbitrary axis algorithm" of
## the DXF reference.  The basis is orthonormal, so the world-to-object
## transform is simply the transpose of the object-to-world transform,
## which is what the trans flag is for.

## threshold of the arbitrary axis algorithm, from the DXF reference
ARBITRARY_AXIS_LIMIT = 1.0 / 64.0


def _dot4(a, b):
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2] + a[3]*b[3]


class Matrix:
    """4x4 transformation matrix class for transforming homogeneous 3D coordinates"""

    def __init__(self, a=None, trans=False):
        self.m = [[1.0, 0.0, 0.0, 0.0],
                  [0.0, 1.0, 0.0, 0.0],
                  [0.0, 0.0, 1.0, 0.0],
                  [0.0, 0.0, 0.0, 1.0]]
        self.trans = False

        if isinstance(a, Matrix):
            for i in range(4):
                self.setrow(i, a.getrow(i))
        elif isinstance(a, (tuple, list)):
            if len(a) == 4 and all(isinstance(r, (tuple, list)) and len(r) == 4 for r in a):
                for i in range(4):
                    for j in range(4):
                        self.set(i, j, a[i][j])
            elif len(a) == 16:
                for ind, x in enumerate(a):
                    self.set(ind // 4, ind % 4, x)
            else:
                raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
        elif a is not None:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
        self.trans = trans

    def __repr__(self):
        return "Matrix({},{},{},{},{})".format(self.m[0], self.m[1],
                                               self.m[2], self.m[3], self.trans)

    # return value indexed by i,j
    def get(self, i, j):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to get: {},{}'.format(i, j))
        if self.trans:
            return self.m[j][i]
        return self.m[i][j]

    # set value indexed by i,j
    def set(self, i, j, x):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to set: {},{}'.format(i, j))
        if not isgoodnum(x):
            raise ValueError('bad value passed to set: {}'.format(x))
        if self.trans:
            self.m[j][i] = float(x)
        else:
            self.m[i][j] = float(x)

    def getrow(self, i):
        if i < 0 or i > 3:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        if self.trans:
            return [self.m[0][i], self.m[1][i], self.m[2][i], self.m[3][i]]
        return list(self.m[i])

    def getcol(self, j):
        if j < 0 or j > 3:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        if self.trans:
            return list(self.m[j])
        return [self.m[0][j], self.m[1][j], self.m[2][j], self.m[3][j]]

    def setrow(self, i, x):
        if not (isinstance(x, (tuple, list)) and len(x) == 4):
            raise ValueError('bad non-vector passed to setrow: {}'.format(x))
        for j in range(4):
            self.set(i, j, x[j])

    def transpose(self):
        """return a transposed view of this matrix, sharing no storage"""
        return Matrix(self.m, not self.trans)

    # matrix multiply.  If x is a matrix, compute MX.  If x is a
    # Vector3 or homogeneous 4 list, compute Mx. If x is a scalar,
    # compute xM.  Respects transpose flag.

    def mul(self, x):
        if isinstance(x, Matrix):
            result = Matrix()
            for i in range(4):
                for j in range(4):
                    result.set(i, j, _dot4(self.getrow(i), x.getcol(j)))
            return result
        elif isinstance(x, Vector3):
            v = [x.x, x.y, x.z, 1.0]
            r = [_dot4(self.getrow(i), v) for i in range(4)]
            if abs(r[3]) < epsilon:
                raise ValueError('point transformed to infinity: {}'.format(x))
            return Vector3(r[0] / r[3], r[1] / r[3], r[2] / r[3])
        elif isinstance(x, (tuple, list)) and len(x) == 4:
            return [_dot4(self.getrow(i), x) for i in range(4)]
        elif isgoodnum(x):
            result = Matrix()
            for i in range(4):
                result.setrow(i, [c * x for c in self.getrow(i)])
            return result

        raise ValueError('bad thing passed to mul(): {}'.format(x))


class CoordinateSystem(Enum):
    WORLD = "world"
    OBJECT = "object"


## callable shape of transform(), for code that accepts an injected
## coordinate transform
TransformFunc = Callable[[Vector3, Vector3, CoordinateSystem, CoordinateSystem], Vector3]


def arbitrary_axis(normal):
    """Return the object-to-world matrix for the OCS defined by ``normal``.

    The columns of the rotation part are the OCS x axis, y axis and the
    normalized ``normal``, computed with the DXF arbitrary axis
    algorithm.
    """
    n = Vector3.of(normal)
    if n.magnitude() < epsilon:
        raise ValueError('zero-length normal not allowed')
    n.normalize()

    if abs(n.x) < ARBITRARY_AXIS_LIMIT and abs(n.y) < ARBITRARY_AXIS_LIMIT:
        ax = Vector3.unit_y().cross(n)
    else:
        ax = Vector3.unit_z().cross(n)
    ax.normalize()
    ay = n.cross(ax).normalize()

    return Matrix([[ax.x, ay.x, n.x, 0.0],
                   [ax.y, ay.y, n.y, 0.0],
                   [ax.z, ay.z, n.z, 0.0],
                   [0.0, 0.0, 0.0, 1.0]])


def transform(point, normal, from_cs, to_cs):
    """Map ``point`` between the world frame and the OCS of ``normal``.

    Swapping ``from_cs`` and ``to_cs`` gives the inverse mapping.  A
    transform between identical systems returns a copy of ``point``.
    """
    if not isinstance(from_cs, CoordinateSystem) or not isinstance(to_cs, CoordinateSystem):
        raise ValueError('bad coordinate systems passed to transform: {}, {}'.format(from_cs, to_cs))
    p = Vector3.of(point)
    if from_cs == to_cs:
        return p
    basis = arbitrary_axis(normal)
    if from_cs == CoordinateSystem.WORLD:
        return basis.transpose().mul(p)
    return basis.mul(p)


def transform_points(points: Iterable, normal, from_cs, to_cs) -> List[Vector3]:
    """list form of transform(), computing the basis only once"""
    if not isinstance(from_cs, CoordinateSystem) or not isinstance(to_cs, CoordinateSystem):
        raise ValueError('bad coordinate systems passed to transform_points: {}, {}'.format(from_cs, to_cs))
    if from_cs == to_cs:
        return [Vector3.of(p) for p in points]
    basis = arbitrary_axis(normal)
    if from_cs == CoordinateSystem.WORLD:
        basis = basis.transpose()
    return [basis.mul(Vector3.of(p)) for p in points]
