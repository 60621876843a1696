import math

import pytest

from geokernel.errors import InvalidArgumentError, SingularMatrixError
from geokernel.xform import *
## unit tests for geokernel xform.py

class TestXform:
    """unit tests for geokernel matrix operations"""

    def test_matrix(self):
        foo = Matrix([1,2,3,4,5,6,7,8,9,10,11,12,13,14,15,16])
        fooT = Matrix(foo,True)
        bar = Matrix([[1,0,0,1],[0,1,0,1],[0,0,1,1],[0,0,0,1]])
        baz = [1,2,3,1]
        I = Matrix()
        a = 10.0
        assert(I.mul(bar).m == bar.m)
        assert(I.mul(foo).m == foo.m)
        assert(I.mul(fooT).m == fooT.mul(I).m)
        assert(I.mul(I).m == I.m)
        assert(foo.mul(bar).m == [[1,2,3,10],[5,6,7,26],[9,10,11,42],[13,14,15,58]])
        assert(foo.mul(baz) == [18, 46, 74, 102])
        assert(foo.mul(a).m == [[10.0,20.0,30.0,40.0],
                                [50.0,60.0,70.0,80.0],
                                [90.0,100.0,110.0,120.0],
                                [130.0,140.0,150.0,160.0]])
        assert(I.mul(baz) == baz)

    def test_transpose(self):
        foo = Matrix([1,2,3,4,5,6,7,8,9,10,11,12,13,14,15,16])
        fooT = Matrix(foo,True)
        assert fooT.get(0,1) == 5
        assert fooT.getrow(0) == [1,5,9,13]
        assert fooT.getcol(0) == [1,2,3,4]
        assert fooT.clone().astuple() == fooT.astuple()
        assert not fooT.clone().trans

    def test_bad_values(self):
        with pytest.raises(InvalidArgumentError):
            Matrix([1,2,3])
        with pytest.raises(ValueError):
            Matrix([[1,0,0,0],[0,1,0,0],[0,0,1,0],[0,0,0,True]])
        with pytest.raises(InvalidArgumentError):
            Matrix().get(4,0)
        with pytest.raises(InvalidArgumentError):
            Matrix().mul("nope")

    def test_clone_is_independent(self):
        m = Matrix()
        c = m.clone()
        c.set(0,3,5.0)
        assert m.get(0,3) == 0
        assert c.get(0,3) == 5.0
        assert m != c

    def test_is_identity_is_exact(self):
        assert Matrix().is_identity
        m = Matrix()
        m.set(1,2,1e-300)
        assert not m.is_identity
        assert not Translation([1,0,0]).is_identity

    def test_inverse(self):
        m = Translation([1,2,3]).mul(Rotation([0,0,1],30.0)).mul(Scale(2.0))
        inv = m.inverse()
        prod = m.mul(inv)
        for i in range(4):
            for j in range(4):
                assert abs(prod.get(i,j) - (1.0 if i == j else 0.0)) < 1e-12

    def test_inverse_leaves_original(self):
        m = Scale(2.0)
        before = m.astuple()
        m.inverse()
        assert m.astuple() == before

    def test_singular(self):
        with pytest.raises(SingularMatrixError):
            Scale(1.0,0.0,1.0).inverse()
        with pytest.raises(ArithmeticError):
            Matrix([0]*16).inverse()

    def test_analytic_inverses(self):
        for fwd, back in [(Rotation([1,1,0],45.0), Rotation([1,1,0],45.0,inverse=True)),
                          (Translation([1,-2,3]), Translation([1,-2,3],inverse=True)),
                          (Scale(2,4,8), Scale(2,4,8,inverse=True))]:
            prod = fwd.mul(back)
            for i in range(4):
                for j in range(4):
                    assert abs(prod.get(i,j) - (1.0 if i == j else 0.0)) < 1e-12

    def test_rotation(self):
        R = Rotation([0,0,1],90.0)
        p = R.mul([1,0,0,1])
        assert abs(p[0]) < 1e-12
        assert abs(p[1] - 1.0) < 1e-12
        with pytest.raises(InvalidArgumentError):
            Rotation([0,0,0],10.0)
