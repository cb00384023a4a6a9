from typing import Self
from typing import Callable, Generic, Optional, TypeVar
import logging

from .element import Element
from .errors import HomomorphismPropertyError
from .finite import FiniteGroup

__all__ = ['Homomorphism']

logger = logging.getLogger(__name__)

G = TypeVar('G', bound=Element)
H = TypeVar('H', bound=Element)
K = TypeVar('K', bound=Element)


class Homomorphism(Generic[G, H]):
	'''
	a map `f: G → H` between groups (possibly of different element types)
	that preserves the operation.

	only the mapping function and an optional description are stored; the
	groups themselves are passed to each method that needs them.
	'''

	def __init__(self, mapping: Callable[[G], H], description: Optional[str] = None):
		'''
		unchecked constructor: `mapping` is trusted to satisfy
		`f(a * b) == f(a) * f(b)`. see `Homomorphism.checked()`.
		'''
		self._mapping = mapping
		self._description = description

	@classmethod
	def checked(cls, source: FiniteGroup[G], mapping: Callable[[G], H], description: Optional[str] = None) -> Self:
		'''
		verifies `f(a * b) == f(a) * f(b)` for every ordered pair of elements
		of `source`, using `checked_op` on both sides (so a DomainMismatchError
		from either side propagates). O(|G|²).

		raises HomomorphismPropertyError on the first violating pair.
		'''
		for a in source:
			fa = mapping(a)
			for b in source:
				lhs = mapping(a.checked_op(b))
				rhs = fa.checked_op(mapping(b))
				if lhs != rhs:
					logger.error('homomorphism property fails for (%s, %s): %s != %s', a, b, lhs, rhs)
					raise HomomorphismPropertyError(a, b, lhs, rhs)
		return cls(mapping, description)

	@property
	def description(self) -> Optional[str]:
		return self._description

	def __repr__(self):
		return f'{type(self).__name__}({self._description or "<function>"})'

	def apply(self, g: G) -> H:
		return self._mapping(g)

	def __call__(self, g: G) -> H:
		return self._mapping(g)

	def compose(self, other: 'Homomorphism[K, G]') -> 'Homomorphism[K, H]':
		''' `self ∘ other`: apply `other` first '''
		description = None
		if self._description and other._description:
			description = f'({self._description}) ∘ ({other._description})'
		return Homomorphism(lambda x: self._mapping(other._mapping(x)), description)

	def kernel(self, source: FiniteGroup[G], target_identity: H) -> FiniteGroup[G]:
		''' {g ∈ G | f(g) = e_H}, as a checked group '''
		return FiniteGroup.checked( g for g in source if self._mapping(g) == target_identity )

	def image(self, source: FiniteGroup[G]) -> FiniteGroup[H]:
		''' {f(g) | g ∈ G}, deduplicated '''
		return FiniteGroup(dict.fromkeys( self._mapping(g) for g in source ))

	def is_injective(self, source: FiniteGroup[G]) -> bool:
		seen = set()
		for g in source:
			x = self._mapping(g)
			if x in seen:
				return False
			seen.add(x)
		return True

	def is_surjective(self, source: FiniteGroup[G], target: FiniteGroup[H]) -> bool:
		image = self.image(source)
		if len(image) != len(target):
			return False
		return image == target
