from typing import Self
from typing import Iterable, Sequence
import itertools
import logging
import math

from .element import Element
from .errors import DomainMismatchError
from .modulo import AdditiveResidue

__all__ = ['DirectProductElement', 'direct_product_group', 'from_decomposition']

logger = logging.getLogger(__name__)


# DIRECT PRODUCT
# --------------

class DirectProductElement(Element):
	'''
	element of a direct product Z_m1 × ... × Z_mk of additive cyclic groups,
	with tuple shape. operations act component-wise.
	'''

	_value: tuple[AdditiveResidue, ...]

	@property
	def value(self) -> tuple[AdditiveResidue, ...]:
		''' underlying components '''
		return self._value

	@property
	def moduli(self) -> tuple[int, ...]:
		return tuple( x.modulus for x in self._value )

	def __init__(self, *components: AdditiveResidue):
		assert all(isinstance(x, AdditiveResidue) for x in components), 'components must be additive residues'
		self._value = tuple(components)

	# pass sequence protocol to underlying tuple

	def __len__(self):
		return len(self._value)
	def __getitem__(self, i):
		return self._value[i]
	def __iter__(self):
		return iter(self._value)

	def _cmpkey(self):
		return tuple( x._cmpkey() for x in self._value )

	def _check_domain(self, other: Self):
		if len(self._value) != len(other._value):
			logger.error('direct product elements have %d and %d components', len(self._value), len(other._value))
			raise DomainMismatchError(f'component count mismatch: {len(self._value)} != {len(other._value)}')
		for a, b in zip(self._value, other._value):
			a._check_domain(b)

	def canonical_bytes(self) -> bytes:
		return b''.join(x.canonical_bytes() for x in self._value)

	def __str__(self):
		return '(' + ', '.join(str(x.value) for x in self._value) + ')'

	def value_repr(self):
		return ', '.join(repr(x) for x in self._value)

	# core group operations

	@property
	def ID(self) -> Self:
		return type(self)(*( x.ID for x in self._value ))

	def _mul(self, other: Self) -> Self:
		assert len(self._value) == len(other._value), 'direct product elements must have the same number of components'
		return type(self)(*( a._mul(b) for a, b in zip(self._value, other._value) ))

	@property
	def inv(self) -> Self:
		return type(self)(*( a.inv for a in self._value ))

	def _pow(self, x: int) -> Self:
		return type(self)(*( a._pow(x) for a in self._value ))

	def order(self) -> int:
		return math.lcm(*( a.order() for a in self._value ))


def direct_product_group(moduli: Sequence[int]) -> list[DirectProductElement]:
	''' all elements of Z_m1 × ... × Z_mk, in lexicographic order '''
	parts = [ AdditiveResidue.generate_group(m) for m in moduli ]
	return [ DirectProductElement(*xs) for xs in itertools.product(*parts) ]

def from_decomposition(decomposition: Iterable[tuple[int, int]]) -> list[DirectProductElement]:
	'''
	builds Z_(p1^e1) × ... × Z_(pk^ek) from `(prime, exponent)` pairs, such as
	the ones returned by `FiniteGroup.abelian_decomposition()`.
	'''
	return direct_product_group([ p ** e for p, e in decomposition ])
