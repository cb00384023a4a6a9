from typing import Self
from typing import Generic, TypeVar
import enum
import logging

from .element import Element
from .errors import (
	DifferentSubgroupError, InvalidSubgroupError, MixedCosetSideError,
	NotClosedError, NotNormalError, NotProperSubgroupError,
)
from .finite import FiniteGroup

__all__ = ['CosetSide', 'Coset', 'FactorGroup']

logger = logging.getLogger(__name__)

E = TypeVar('E', bound=Element)


class CosetSide(enum.Enum):
	LEFT = 'left'
	RIGHT = 'right'


# COSET
# -----

class Coset(Element, Generic[E]):
	'''
	a coset `gH` (left) or `Hg` (right) of a subgroup `H`, described by a
	representative `g`.

	the subgroup object is shared, never copied: it must outlive (and must
	not be mutated during the life of) every coset referencing it.

	equality follows the coset equivalence, not the stored representative:

		left:   aH == bH  iff  a^-1 * b ∈ H
		right:  Ha == Hb  iff  b * a^-1 ∈ H

	the hash is taken from the canonical representative (the member with the
	smallest canonical encoding), so equal cosets hash identically even for
	element types without a natural order.
	'''

	_representative: E
	_subgroup: FiniteGroup[E]
	_side: CosetSide

	def __init__(self, representative: E, subgroup: FiniteGroup[E], side: CosetSide = CosetSide.LEFT):
		self._representative = representative
		self._subgroup = subgroup
		self._side = side

	@classmethod
	def checked(cls, representative: E, subgroup: FiniteGroup[E], side: CosetSide = CosetSide.LEFT) -> Self:
		''' like the constructor, but raises InvalidSubgroupError if `subgroup` isn't closed '''
		if not subgroup.elements or not subgroup.is_closed():
			logger.error('coset subgroup is not closed: %s', subgroup)
			raise InvalidSubgroupError(f'{subgroup} is not closed under its operation')
		return cls(representative, subgroup, side)

	@property
	def representative(self) -> E:
		return self._representative

	@property
	def subgroup(self) -> FiniteGroup[E]:
		return self._subgroup

	@property
	def side(self) -> CosetSide:
		return self._side

	def _translate(self, h: E) -> E:
		if self._side is CosetSide.LEFT:
			return self._representative._mul(h)
		return h._mul(self._representative)

	def enumerate(self) -> list[E]:
		''' the |H| members of this coset: `g * h` (left) or `h * g` (right) for every `h` in H '''
		return [ self._translate(h) for h in self._subgroup ]

	def __contains__(self, x: E) -> bool:
		if self._side is CosetSide.LEFT:
			return self._representative.inv._mul(x) in self._subgroup
		return x._mul(self._representative.inv) in self._subgroup

	def canonical_representative(self) -> E:
		''' the member of this coset with the lexicographically smallest canonical encoding '''
		return min(self.enumerate(), key=lambda x: x.canonical_bytes())

	# formatting

	def __str__(self):
		if self._side is CosetSide.LEFT:
			return f'{self._representative}H'
		return f'H{self._representative}'

	def __repr__(self):
		return f'{type(self).__name__}({self._representative!r}, <subgroup of order {len(self._subgroup)}>, {self._side})'

	# comparison / hashing

	def _same_domain(self, other: 'Coset') -> bool:
		return self._side is other._side and (self._subgroup is other._subgroup or self._subgroup == other._subgroup)

	def __eq__(self, other):
		if not isinstance(other, Coset):
			return NotImplemented
		if not self._same_domain(other):
			return False
		a, b = self._representative, other._representative
		if self._side is CosetSide.LEFT:
			return a.inv._mul(b) in self._subgroup
		return b._mul(a.inv) in self._subgroup

	def __ne__(self, other):
		result = self.__eq__(other)
		return result if result is NotImplemented else not result

	def __hash__(self):
		return hash((self._side, self.canonical_bytes(), self._subgroup))

	def _cmpkey(self):
		return (self._side.value, self.canonical_bytes())

	def canonical_bytes(self) -> bytes:
		return self.canonical_representative().canonical_bytes()

	# group operations

	@property
	def ID(self) -> Self:
		return type(self)(self._representative.ID, self._subgroup, self._side)

	def _mul(self, other: Self) -> Self:
		''' `(aH)(bH) = (ab)H`; only well defined when H is normal '''
		assert self._side is other._side, 'cannot mix left and right cosets'
		return type(self)(self._representative._mul(other._representative), self._subgroup, self._side)

	@property
	def inv(self) -> Self:
		return type(self)(self._representative.inv, self._subgroup, self._side)

	def _check_domain(self, other: Self):
		if self._side is not other._side:
			logger.error('cannot mix left/right coset for operation')
			raise MixedCosetSideError('cannot operate a left coset with a right coset')
		if not (self._subgroup is other._subgroup or self._subgroup == other._subgroup):
			logger.error('cosets must be from the same subgroup')
			raise DifferentSubgroupError('cannot operate cosets of different subgroups')
		self._representative._check_domain(other._representative)


# FACTOR GROUP
# ------------

class FactorGroup(Generic[E]):
	'''
	the quotient G/N of a group by a normal subgroup. both groups are
	referenced, not copied. its elements are left cosets of N.
	'''

	_group: FiniteGroup[E]
	_normal_subgroup: FiniteGroup[E]

	def __init__(self, group: FiniteGroup[E], subgroup: FiniteGroup[E]):
		'''
		raises NotClosedError if either group isn't closed, InvalidSubgroupError
		if `subgroup` is empty or not contained in `group`, NotNormalError if
		`subgroup` isn't normal in `group`, and NotProperSubgroupError if both
		have the same order.
		'''
		if not group.is_closed() or not subgroup.is_closed():
			logger.error('one of the group/subgroup is not closed')
			raise NotClosedError('group and subgroup must be closed')
		if not group.is_subgroup(subgroup):
			logger.error('%s is not a subgroup of %s', subgroup, group)
			raise InvalidSubgroupError(f'{subgroup} is not a non-empty subset of {group}')
		if not group.is_normal(subgroup):
			logger.error('subgroup is not normal in group')
			raise NotNormalError(f'{subgroup} is not normal in {group}')
		if len(group) == len(subgroup):
			logger.error('the order of group and its subgroup is equal')
			raise NotProperSubgroupError('group and subgroup have the same order')
		self._group = group
		self._normal_subgroup = subgroup

	@property
	def group(self) -> FiniteGroup[E]:
		return self._group

	@property
	def normal_subgroup(self) -> FiniteGroup[E]:
		return self._normal_subgroup

	def coset(self, g: E) -> Coset[E]:
		return Coset(g, self._normal_subgroup, CosetSide.LEFT)

	# group operations (results are always left cosets)

	def operate(self, a: Coset[E], b: Coset[E]) -> Coset[E]:
		return self.coset(a.representative._mul(b.representative))

	def inverse(self, a: Coset[E]) -> Coset[E]:
		return self.coset(a.representative.inv)

	def identity(self) -> Coset[E]:
		return self.coset(self._group.identity())

	def order(self) -> int:
		''' |G| / |N|, by Lagrange's theorem '''
		return len(self._group) // len(self._normal_subgroup)

	def __len__(self) -> int:
		return self.order()

	def is_closed(self) -> bool:
		# closure follows from normality, checked on construction
		return True

	def cosets(self) -> list[Coset[E]]:
		''' the distinct cosets, each represented by its canonical representative '''
		result: list[Coset[E]] = []
		seen: set[Coset[E]] = set()
		for g in self._group:
			coset = self.coset(g)
			if coset not in seen:
				seen.add(coset)
				result.append(self.coset(coset.canonical_representative()))
		return result

	def is_abelian(self) -> bool:
		cosets = self.cosets()
		return all(self.operate(a, b) == self.operate(b, a) for i, a in enumerate(cosets) for b in cosets[i+1:])

	def as_group(self) -> FiniteGroup[Coset[E]]:
		''' the factor group as a FiniteGroup of its cosets '''
		return FiniteGroup(self.cosets())

	def __str__(self):
		return '{' + ', '.join(map(str, self.cosets())) + '}'
