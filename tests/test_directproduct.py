import pytest

from finalg import AdditiveResidue, DirectProductElement, FiniteGroup, direct_product_group, from_decomposition
from finalg.errors import DomainMismatchError


def element(*pairs):
	return DirectProductElement(*( AdditiveResidue(v, m) for v, m in pairs ))

def test_op():
	c = element((1, 3), (2, 5)) * element((2, 3), (3, 5))
	assert [ x.value for x in c ] == [0, 0]

def test_inverse():
	inverse = element((1, 3), (2, 5)).inv
	assert [ x.value for x in inverse ] == [2, 3]

def test_checked_op():
	c = element((1, 3), (2, 5)).checked_op(element((2, 3), (3, 5)))
	assert c == element((0, 3), (0, 5))

def test_checked_op_different_component_count():
	with pytest.raises(DomainMismatchError):
		element((1, 3)).checked_op(element((2, 5), (3, 7)))

def test_checked_op_different_moduli():
	with pytest.raises(DomainMismatchError):
		element((1, 3), (1, 4)).checked_op(element((1, 3), (1, 5)))

def test_order():
	assert element((1, 2), (1, 3)).order() == 6
	assert element((0, 2), (2, 4)).order() == 2
	assert not element((0, 2), (0, 3))

def test_direct_product_group():
	group = FiniteGroup.checked(direct_product_group([2, 3]))
	assert group.order() == 6
	assert group.is_abelian()
	assert group.identity() == element((0, 2), (0, 3))
	assert group.elements[0].moduli == (2, 3)

def test_from_decomposition():
	group = FiniteGroup.checked(from_decomposition([(2, 2), (3, 1)]))
	assert group.order() == 12
	assert group.elements[0].moduli == (4, 3)
	assert group.abelian_decomposition() == [(2, 2), (3, 1)]

def test_canonical_bytes():
	a = element((1, 3), (2, 5))
	assert a.canonical_bytes() == AdditiveResidue(1, 3).canonical_bytes() + AdditiveResidue(2, 5).canonical_bytes()

def test_display():
	assert str(element((1, 3), (2, 5))) == '(1, 2)'
