from typing import Self
from typing import Generic, Iterable, Iterator, Optional, TypeVar
from concurrent.futures import Executor, ProcessPoolExecutor
import collections
import functools
import logging

from .element import Element
from .errors import (
	IdentityNotFoundError, NotAbelianError, NotClosedError,
	NotNormalError, NotProperSubgroupError,
)
from . import utils

__all__ = ['FiniteGroup', 'AbelianDecomposition']

logger = logging.getLogger(__name__)

E = TypeVar('E', bound=Element)

AbelianDecomposition = list[tuple[int, int]]
''' `(prime, exponent)` pairs whose prime powers multiply to the group order '''


# workers for the parallel checks. they live at module level so that a
# process pool can pickle them; each one reads only its arguments.

def _row_closed(elements: tuple, members: frozenset, i: int) -> bool:
	a = elements[i]
	return all(a._mul(b) in members for b in elements)

def _row_abelian(elements: tuple, i: int) -> bool:
	a = elements[i]
	return all(a._mul(b) == b._mul(a) for b in elements[i+1:])


# FINITE GROUP
# ------------

class FiniteGroup(Generic[E]):
	'''
	a finite collection of elements, treated as a set, together with the
	operation of its element type.

	the plain constructor trusts the caller (elements are not checked for
	duplicates nor closure); use `FiniteGroup.checked()` to validate. groups
	are immutable after construction.

	associativity is never verified: the element type is trusted to provide
	an associative operation.

	equality is set equality. the hash is computed from the sorted canonical
	encodings of the elements, so set-equal groups hash identically whatever
	the order in which they store their elements.
	'''

	_elements: tuple[E, ...]
	_members: frozenset[E]

	def __init__(self, elements: Iterable[E]):
		self._elements = tuple(elements)
		self._members = frozenset(self._elements)
		self._hash: Optional[int] = None

	@classmethod
	def checked(cls, elements: Iterable[E]) -> Self:
		'''
		construct a group, verifying that the elements are pairwise distinct
		and closed under the operation. raises NotClosedError otherwise.
		'''
		group = cls(elements)
		if not group._elements:
			logger.error('cannot build a group without elements')
			raise NotClosedError('a group needs at least one element')
		if len(group._members) != len(group._elements):
			logger.error('group elements contain duplicates')
			raise NotClosedError('group elements must be distinct')
		if not group.is_closed():
			logger.error('elements are not closed under the operation: %s', group)
			raise NotClosedError(f'{group} is not closed under its operation')
		return group

	# set / sequence protocol

	@property
	def elements(self) -> tuple[E, ...]:
		return self._elements

	def order(self) -> int:
		''' number of elements of the group '''
		return len(self._elements)

	def __len__(self) -> int:
		return len(self._elements)

	def __iter__(self) -> Iterator[E]:
		return iter(self._elements)

	def __contains__(self, x) -> bool:
		return x in self._members

	def __eq__(self, other):
		if not isinstance(other, FiniteGroup):
			return NotImplemented
		return self is other or self._members == other._members

	def __hash__(self):
		if self._hash is None:
			self._hash = hash(tuple(sorted( x.canonical_bytes() for x in self._members )))
		return self._hash

	def __str__(self):
		return '{' + ', '.join(map(str, self._elements)) + '}'

	def __repr__(self):
		return f'{type(self).__name__}([{", ".join(map(repr, self._elements))}])'

	# group operations

	def operate(self, a: E, b: E) -> E:
		return a._mul(b)

	def inverse(self, a: E) -> E:
		return a.inv

	def identity(self) -> E:
		'''
		the element `e` with `e * x == x * e == x` for every member `x`.
		raises IdentityNotFoundError if there is none.
		'''
		for e in self._elements:
			if all(e._mul(x) == x and x._mul(e) == x for x in self._elements):
				return e
		logger.error('no identity element in %s', self)
		raise IdentityNotFoundError(f'{self} has no identity element')

	# verification

	def is_closed(self) -> bool:
		members = self._members
		return all(a._mul(b) in members for a in self._elements for b in self._elements)

	def is_abelian(self) -> bool:
		xs = self._elements
		return all(a._mul(b) == b._mul(a) for i, a in enumerate(xs) for b in xs[i+1:])

	def _par_all(self, fn, executor: Optional[Executor], max_workers: Optional[int], chunksize: int) -> bool:
		indices = range(len(self._elements))
		if executor is not None:
			return all(executor.map(fn, indices, chunksize=chunksize))
		with ProcessPoolExecutor(max_workers=max_workers) as pool:
			return all(pool.map(fn, indices, chunksize=chunksize))

	def par_is_closed(self, executor: Optional[Executor] = None, max_workers: Optional[int] = None, chunksize: int = 1) -> bool:
		'''
		data-parallel `is_closed()`: each row of the operation table is
		checked by an independent worker and the results are AND-ed.

		if no `executor` is given, a ProcessPoolExecutor with `max_workers`
		is created for the call (elements must then be picklable).
		'''
		fn = functools.partial(_row_closed, self._elements, self._members)
		return self._par_all(fn, executor, max_workers, chunksize)

	def par_is_abelian(self, executor: Optional[Executor] = None, max_workers: Optional[int] = None, chunksize: int = 1) -> bool:
		''' data-parallel `is_abelian()`, see `par_is_closed()` '''
		fn = functools.partial(_row_abelian, self._elements)
		return self._par_all(fn, executor, max_workers, chunksize)

	def is_normal(self, subgroup: 'FiniteGroup[E]') -> bool:
		''' whether `g * h * g^-1` stays in `subgroup` for every `g` here and `h` there '''
		return all(g._mul(h)._mul(g.inv) in subgroup for g in self._elements for h in subgroup)

	def is_subgroup(self, subgroup: 'FiniteGroup[E]') -> bool:
		''' whether `subgroup` is a non-empty subset of this group, closed under its operation '''
		return bool(subgroup._elements) and subgroup._members <= self._members and subgroup.is_closed()

	# generation

	def generate_subgroup(self, generators: Iterable[E]) -> 'FiniteGroup[E]':
		'''
		the smallest subgroup containing `generators`: breadth-first closure
		of {e} ∪ generators under the group operation.
		'''
		e = self.identity()
		generators = list(generators)
		seen = {e, *generators}
		queue = collections.deque(seen)
		while queue:
			x = queue.popleft()
			for g in generators:
				y = x._mul(g)
				if y not in seen:
					seen.add(y)
					queue.append(y)
		return type(self)(seen)

	def generate_normal_subgroup(self, generators: Iterable[E]) -> 'FiniteGroup[E]':
		'''
		closure of {e} ∪ generators under the operation of this group,
		repeated until no new element appears.

		raises NotProperSubgroupError if the result is the whole group, and
		NotNormalError if it is not normal in this group.
		'''
		e = self.identity()
		found = [e]
		seen = {e}
		for g in generators:
			if g not in seen:
				seen.add(g)
				found.append(g)
		pending = list(found)
		while pending:
			a = pending.pop()
			for b in list(found):
				for c in (a._mul(b), b._mul(a)):
					if c not in seen:
						seen.add(c)
						found.append(c)
						pending.append(c)
		subgroup = type(self)(found)
		logger.debug('closure of generators has %d elements', len(found))
		if len(subgroup) == len(self):
			logger.error('generated subgroup is the whole group')
			raise NotProperSubgroupError('generators produce the whole group')
		if not self.is_normal(subgroup):
			logger.error('generated subgroup %s is not normal', subgroup)
			raise NotNormalError(f'{subgroup} is not a normal subgroup')
		return subgroup

	def left_cosets(self, subgroup: 'FiniteGroup[E]') -> list[frozenset[E]]:
		''' the distinct left cosets `gH` of `subgroup`, as sets of elements '''
		result, covered = [], set()
		for g in self._elements:
			if g in covered:
				continue
			coset = frozenset( g._mul(h) for h in subgroup )
			covered |= coset
			result.append(coset)
		return result

	# structure

	def abelian_decomposition(self) -> AbelianDecomposition:
		'''
		for an abelian group, the `(prime, exponent)` pairs of the factorization
		of its order. this only reports the prime-power orders; it does not
		build an isomorphism to a product of cyclic groups (see
		`directproduct.from_decomposition` for the cyclic product itself).

		raises NotAbelianError for non-abelian groups.
		'''
		if not self.is_abelian():
			logger.error('abelian decomposition requested for non-abelian group')
			raise NotAbelianError(f'{self} is not abelian')
		return utils.prime_factorization(len(self))
