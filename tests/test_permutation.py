import itertools

import pytest

from finalg import FiniteGroup, Permutation, AlternatingPermutation, SparsePermutation, cube_rotation_group
from finalg.errors import DomainMismatchError, InvalidPermutationError, NotEvenPermutationError, OrderTooLargeError


def test_create():
	assert Permutation([0, 1, 2]).value == (0, 1, 2)
	with pytest.raises(InvalidPermutationError):
		Permutation([0, 0, 2])
	with pytest.raises(InvalidPermutationError):
		Permutation([0, 3, 1])

def test_op():
	a = Permutation([0, 1, 2, 4, 3])
	b = Permutation([0, 2, 1, 3, 4])
	assert (a * b).value == (0, 2, 1, 4, 3)

def test_op_applies_right_operand_first():
	a = Permutation.from_cycles([[0, 1]], 3)
	b = Permutation.from_cycles([[1, 2]], 3)
	assert (a * b).value == (1, 2, 0)
	for i in range(3):
		assert (a * b)(i) == a(b(i))
	assert a * b != b * a

def test_identity():
	assert Permutation.identity(5) == Permutation([0, 1, 2, 3, 4])
	assert Permutation([2, 0, 1]).ID == Permutation.identity(3)

def test_inverse():
	a = Permutation([2, 1, 0, 4, 3])
	assert a.inv * a == Permutation.identity(5)
	assert Permutation([2, 0, 1]).inv.value == (1, 2, 0)

def test_is_even():
	assert Permutation([1, 0, 2, 4, 3]).is_even()
	assert not Permutation([1, 0, 3, 4, 2]).is_even()
	assert Permutation.identity(4).is_even()

def test_checked_op_size_mismatch():
	with pytest.raises(DomainMismatchError):
		Permutation([0, 1, 2, 3]).checked_op(Permutation([0, 2, 1, 3, 4]))

def test_from_cycles():
	perm = Permutation.from_cycles([[0, 2, 4]], 5)
	assert perm.value == (2, 1, 4, 3, 0)
	assert perm.order() == 3
	assert Permutation.from_cycles([[0], [1, 2]], 3).value == (0, 2, 1)

def test_from_cycles_out_of_bounds():
	with pytest.raises(InvalidPermutationError):
		Permutation.from_cycles([[0, 5]], 4)

def test_from_cycles_overlapping():
	with pytest.raises(InvalidPermutationError):
		Permutation.from_cycles([[0, 1], [1, 2]], 3)

def test_cycles_roundtrip():
	for p in Permutation.generate_group_heap(4):
		assert Permutation.from_cycles(p.cycles(), 4) == p

def test_order():
	assert Permutation([1, 0, 3, 4, 2]).order() == 6
	assert Permutation.identity(4).order() == 1

def test_pow():
	perm = Permutation.from_cycles([[0, 1, 2, 3]], 4)
	assert perm.pow(1).value == (1, 2, 3, 0)
	assert perm.pow(2).value == (2, 3, 0, 1)
	assert perm.pow(3).value == (3, 0, 1, 2)
	assert perm.pow(4) == Permutation.identity(4)
	assert perm.pow(0) == Permutation.identity(4)
	assert perm ** -1 == perm.inv
	assert perm.pow(13) == perm

def test_pow_matches_repeated_product():
	p = Permutation([1, 0, 3, 4, 2])
	acc = p.ID
	for k in range(15):
		assert p.pow(k) == acc
		acc = acc * p

def test_generate_group_heap():
	group = Permutation.generate_group_heap(3)
	assert len(group) == 6
	assert Permutation([0, 1, 2]) in group
	assert len(set(Permutation.generate_group_heap(5))) == 120
	assert Permutation.generate_group_heap(0) == []

def test_generate_group_heap_too_large():
	with pytest.raises(OrderTooLargeError):
		Permutation.generate_group_heap(Permutation.HEAP_LIMIT + 1)

def test_generate_group():
	group = Permutation.generate_group(3)
	assert len(group) == 6
	assert Permutation([0, 1, 2]) in group
	assert set(Permutation.generate_group(4)) == set(Permutation.generate_group_heap(4))
	assert Permutation.generate_group(1) == [Permutation.identity(1)]
	assert Permutation.generate_group(0) == []

def test_symmetric_and_alternating():
	s3 = FiniteGroup.checked(Permutation.generate_group(3))
	a3 = FiniteGroup.checked(Permutation.generate_alternating_group(3))
	assert not s3.is_abelian()
	assert a3.order() == 3
	assert a3.is_abelian()
	assert len(Permutation.generate_alternating_group(4)) == 12

def test_generate_subgroup():
	r = Permutation.full_cycle(4)
	assert set(Permutation.generate_subgroup([r])) == { r ** k for k in range(4) }
	assert Permutation.generate_subgroup([]) == []
	with pytest.raises(DomainMismatchError):
		Permutation.generate_subgroup([Permutation.identity(3), Permutation.identity(4)])

def test_cube_rotation_group():
	group = FiniteGroup.checked(cube_rotation_group())
	assert group.order() == 24
	assert sorted(x.order() for x in group).count(3) == 8

def test_canonical_bytes():
	assert Permutation([0, 1]).canonical_bytes() == bytes(15) + bytes([1])

def test_display():
	assert str(Permutation([0, 2, 1, 4, 3])) == '(1 2) (3 4) '
	assert str(Permutation([0, 1, 2, 3, 4])) == '(e)'
	assert repr(Permutation([1, 0])) == 'Permutation((1,0))'


# alternating

def test_alternating_create_fail():
	with pytest.raises(NotEvenPermutationError):
		AlternatingPermutation([1, 0, 3, 4, 2])

def test_alternating_group():
	a4 = AlternatingPermutation.generate_group(4)
	assert len(a4) == 12
	assert all(isinstance(x, AlternatingPermutation) for x in a4)
	for a, b in itertools.product(a4, repeat=2):
		c = a * b
		assert isinstance(c, AlternatingPermutation) and c.is_even()
	assert FiniteGroup(a4).is_closed()

def test_alternating_equals_permutation():
	p = Permutation.from_cycles([[0, 1, 2]], 3)
	a = AlternatingPermutation.from_permutation(p)
	assert a == p and p == a
	assert hash(a) == hash(p)
	assert a.to_permutation() == p

def test_alternating_mixed_with_odd():
	a = AlternatingPermutation.from_cycles([[0, 1, 2]], 3)
	t = Permutation.from_cycles([[0, 1]], 3)
	for c in (a * t, t * a, a.op(t)):
		assert not c.is_even()
		assert type(c) is Permutation
	assert type(a * a) is AlternatingPermutation
	with pytest.raises(DomainMismatchError):
		a.checked_op(t)
	with pytest.raises(DomainMismatchError):
		a.checked_op(Permutation.from_cycles([[0, 2, 1]], 3))
	assert type(t.checked_op(a)) is Permutation
	assert type(a.checked_op(a)) is AlternatingPermutation


# sparse

def test_sparse_op():
	a = SparsePermutation({0: 1, 1: 2, 2: 0})
	b = SparsePermutation({1: 2, 2: 0, 0: 1})
	c = a * b
	assert c(0) == 2
	assert c(1) == 0
	assert c(2) == 1

def test_sparse_matches_dense():
	for p in Permutation.generate_group_heap(4):
		for q in Permutation.generate_group_heap(4):
			sp, sq = SparsePermutation.from_dense(p), SparsePermutation.from_dense(q)
			assert (sp * sq).to_dense(4) == p * q

def test_sparse_identity_and_inverse():
	a = SparsePermutation({0: 1, 1: 2, 2: 0})
	assert a * SparsePermutation.identity() == a
	assert a * a.inv == SparsePermutation.identity()
	assert (a * a.inv).value == {}
	assert a.order() == 3

def test_sparse_fixed_points_dropped():
	a = SparsePermutation({0: 1, 1: 0, 2: 2})
	b = SparsePermutation({1: 0, 0: 1})
	assert a == b and hash(a) == hash(b)
	assert a.canonical_bytes() == b.canonical_bytes()

def test_sparse_invalid():
	with pytest.raises(InvalidPermutationError):
		SparsePermutation({0: 1, 1: 1})
	with pytest.raises(InvalidPermutationError):
		SparsePermutation.from_cycles([[0, 1], [1, 2]])

def test_sparse_display():
	assert str(SparsePermutation()) == 'id'
	assert str(SparsePermutation.from_cycles([[3, 5], [0, 1, 2]])) == '(0 1 2)(3 5)'
	assert SparsePermutation.from_cycles([[3, 5]]).to_dense(6).value == (0, 1, 2, 5, 4, 3)

def test_sparse_value_is_read_only():
	a = SparsePermutation({0: 1, 1: 0})
	with pytest.raises(TypeError):
		a.value[2] = 3
	assert a.value == {0: 1, 1: 0}
	assert a(2) == 2

def test_canonical_bytes_limit():
	assert len(Permutation.identity(3).canonical_bytes()) == 24
	with pytest.raises(OverflowError):
		SparsePermutation.from_cycles([[0, 2 ** 64]]).canonical_bytes()
