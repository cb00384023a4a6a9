from concurrent.futures import ThreadPoolExecutor
import itertools

import pytest

import finalg
from finalg import (
	AdditiveResidue, MultiplicativeResidue, Permutation, AlternatingPermutation,
	Dihedral, FiniteGroup, direct_product_group,
)
from finalg.errors import (
	IdentityNotFoundError, NotAbelianError, NotClosedError,
	NotNormalError, NotProperSubgroupError,
)


def Z(n, *values):
	return FiniteGroup( AdditiveResidue(v, n) for v in (values or range(n)) )

def verify_group(G: FiniteGroup):
	''' closure, a unique two-sided identity, and two-sided inverses '''
	for a, b in itertools.product(G, repeat=2):
		assert G.operate(a, b) in G
	e = G.identity()
	assert [ x for x in G if all(x * y == y and y * x == y for y in G) ] == [e]
	for x in G:
		assert any(x * y == e and y * x == e for y in G)
		assert G.inverse(x) in G

@pytest.mark.parametrize('elements', [
	AdditiveResidue.generate_group(1),
	AdditiveResidue.generate_group(12),
	MultiplicativeResidue.generate_group(15),
	Permutation.generate_group(4),
	AlternatingPermutation.generate_group(4),
	Dihedral.generate_group(4),
	direct_product_group([2, 2, 3]),
])
def test_group_axioms(elements):
	verify_group(FiniteGroup.checked(elements))

def test_is_closed():
	assert Z(3).is_closed()
	assert not Z(3, 0, 1).is_closed()

def test_checked():
	with pytest.raises(NotClosedError):
		FiniteGroup.checked([ AdditiveResidue(0, 3), AdditiveResidue(1, 3) ])
	with pytest.raises(NotClosedError):
		FiniteGroup.checked([ AdditiveResidue(0, 1), AdditiveResidue(0, 1) ])
	with pytest.raises(NotClosedError):
		FiniteGroup.checked([])

def test_identity():
	assert Z(6).identity() == AdditiveResidue(0, 6)
	assert FiniteGroup(MultiplicativeResidue.generate_group(7)).identity().value == 1
	with pytest.raises(IdentityNotFoundError):
		Z(3, 1, 2).identity()

def test_is_abelian():
	assert Z(6).is_abelian()
	assert not FiniteGroup(Permutation.generate_group(3)).is_abelian()

def test_parallel_checks():
	s3 = FiniteGroup(Permutation.generate_group(3))
	with ThreadPoolExecutor(max_workers=4) as pool:
		assert s3.par_is_closed(executor=pool)
		assert not s3.par_is_abelian(executor=pool)
		assert Z(6).par_is_abelian(executor=pool)
		assert not Z(3, 0, 1).par_is_closed(executor=pool, chunksize=2)

def test_parallel_checks_default_pool():
	s3 = FiniteGroup(Permutation.generate_group(3))
	assert s3.par_is_closed(max_workers=2)
	assert not s3.par_is_abelian(max_workers=2)
	assert not Z(4, 0, 1).par_is_closed(max_workers=2)

def test_parallel_checks_empty_group():
	empty = FiniteGroup([])
	with ThreadPoolExecutor(max_workers=2) as pool:
		assert empty.par_is_closed(executor=pool) == empty.is_closed()
		assert empty.par_is_abelian(executor=pool) == empty.is_abelian()

def test_is_normal():
	s3 = FiniteGroup(Permutation.generate_group(3))
	a3 = FiniteGroup(Permutation.generate_alternating_group(3))
	transposition = FiniteGroup([ Permutation.identity(3), Permutation.from_cycles([[0, 1]], 3) ])
	assert s3.is_normal(a3)
	assert not s3.is_normal(transposition)
	assert s3.is_subgroup(transposition)
	assert not s3.is_subgroup(FiniteGroup([ Permutation.from_cycles([[0, 1]], 3) ]))

def test_generate_normal_subgroup():
	subgroup = Z(6).generate_normal_subgroup([ AdditiveResidue(2, 6) ])
	assert subgroup == Z(6, 0, 2, 4)
	assert sorted( x.value for x in subgroup ) == [0, 2, 4]

def test_generate_normal_subgroup_whole_group():
	with pytest.raises(NotProperSubgroupError):
		Z(6).generate_normal_subgroup([ AdditiveResidue(1, 6) ])

def test_generate_normal_subgroup_not_normal():
	s3 = FiniteGroup(Permutation.generate_group(3))
	with pytest.raises(NotNormalError):
		s3.generate_normal_subgroup([ Permutation.from_cycles([[0, 1]], 3) ])

def test_generate_subgroup():
	s3 = FiniteGroup(Permutation.generate_group(3))
	a3 = FiniteGroup(Permutation.generate_alternating_group(3))
	assert s3.generate_subgroup([ Permutation.full_cycle(3) ]) == a3
	assert len(s3.generate_subgroup([])) == 1

def test_left_cosets():
	s3 = FiniteGroup(Permutation.generate_group(3))
	a3 = FiniteGroup(Permutation.generate_alternating_group(3))
	cosets = s3.left_cosets(a3)
	assert len(cosets) == 2
	assert all(len(c) == 3 for c in cosets)
	assert frozenset(a3) in cosets

def test_abelian_decomposition():
	assert Z(12).abelian_decomposition() == [(2, 2), (3, 1)]
	assert FiniteGroup(MultiplicativeResidue.generate_group(15)).abelian_decomposition() == [(2, 3)]
	with pytest.raises(NotAbelianError):
		FiniteGroup(Permutation.generate_group(3)).abelian_decomposition()

def test_set_semantics():
	elements = Permutation.generate_group(3)
	a, b = FiniteGroup(elements), FiniteGroup(reversed(elements))
	assert a == b
	assert hash(a) == hash(b)
	assert Z(6) == Z(6, 5, 4, 3, 2, 1, 0)
	assert hash(Z(6)) == hash(Z(6, 5, 4, 3, 2, 1, 0))
	assert Z(6) != Z(6, 0, 2, 4)
	assert len({ Z(4), Z(4, 3, 2, 1, 0), Z(4, 0, 2) }) == 2

def test_automagic_groups():
	assert len(finalg.S4) == 24
	assert len(finalg.A4) == 12
	assert len(finalg.U7) == 6
	assert len(finalg.D5) == 10
	assert finalg.Z6 == Z(6)
	assert finalg.Z6 is finalg.Z6
	with pytest.raises(AttributeError):
		finalg.Q8