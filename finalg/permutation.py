from typing import Self
from typing import ClassVar, Iterator, Iterable, Mapping, Sequence
import collections
import logging
import math
import types

from .element import Element
from .errors import DomainMismatchError, InvalidPermutationError, NotEvenPermutationError, OrderTooLargeError
from . import utils

__all__ = [
	'Permutation', 'AlternatingPermutation', 'SparsePermutation',
	'cube_rotation_group',
]

logger = logging.getLogger(__name__)


# PERMUTATION
# -----------

class Permutation(Element):
	'''
	permutation of `0..n`, stored densely: `value[i]` is the image of `i`.

	the implemented operation follows usual left action notation, meaning
	`a * b` is equivalent to the composition `a ∘ b` of their associated
	functions (b is performed first, then a):

		(a * b)[i] == a[b[i]]
	'''

	HEAP_LIMIT: ClassVar[int] = 9
	''' largest size `generate_group_heap` accepts (memory grows as n!) '''

	# class definition

	_value: tuple[int, ...]

	@property
	def value(self) -> tuple[int, ...]:
		''' underlying permutation value (tuple of indices) '''
		return self._value

	@property
	def size(self) -> int:
		return len(self._value)

	def __init__(self, value: Iterable[int]):
		value = tuple(value)
		if not utils.is_mapping_valid(value):
			logger.error('invalid mapping: %s', value)
			raise InvalidPermutationError(f'{value} is not a bijection of 0..{len(value)}')
		self._value = value

	@classmethod
	def unchecked(cls, value: tuple[int, ...]) -> Self:
		''' construct from a tuple that is trusted to be a bijection '''
		x = cls.__new__(cls)
		x._value = value
		return x

	def _cmpkey(self):
		return self._value

	def _check_domain(self, other: Self):
		if len(self._value) != len(other._value):
			logger.error('size mismatch: %d != %d', len(self._value), len(other._value))
			raise DomainMismatchError(f'size mismatch: {len(self._value)} != {len(other._value)}')

	def canonical_bytes(self) -> bytes:
		''' each image as 8 bytes big-endian, so sizes must stay below 2**64 '''
		return b''.join(x.to_bytes(8, 'big') for x in self._value)

	# formatting

	def __str__(self):
		cycles = self.cycles(sort=False, fixpoints=False)
		if not cycles:
			return '(e)'
		return ''.join('(' + ' '.join(map(str, c)) + ') ' for c in cycles)

	def value_repr(self):
		return '(' + ','.join(map(str, self._value)) + ')'

	# core group operations

	@classmethod
	def identity(cls, size: int) -> Self:
		return cls.unchecked(tuple(range(size)))

	@property
	def ID(self) -> Self:
		return type(self).identity(len(self._value))

	def _mul(self, other: Self) -> Self:
		assert len(self._value) == len(other._value), 'permutation sizes must match'
		value = tuple( self._value[j] for j in other._value )
		# mixing subclasses falls back to the plain symmetric group
		cls = type(self) if type(self) is type(other) else Permutation
		return cls.unchecked(value)

	@property
	def inv(self) -> Self:
		result = [-1] * len(self._value)
		for i, j in enumerate(self._value):
			result[j] = i
		return type(self).unchecked(tuple(result))

	def pow(self, x: int) -> Self:
		''' `self ** x` by square-and-multiply, O(log x) compositions '''
		return self._pow(x)

	# cycle decomposition

	def cycles_iter(self) -> Iterator[list[int]]:
		''' like cycles(sort=False), but yields an iterator over the discovered cycles '''
		seen = 0
		while True:
			# consult start of next cycle to extract
			pending = ~seen
			start_bit = pending & ~(pending - 1)
			start = start_bit.bit_length() - 1
			if not (start < len(self._value)):
				break
			# extract cycle
			cursor, cycle = start, []
			while True:
				cycle.append(cursor)
				seen |= 1 << cursor
				cursor = self._value[cursor]
				if cursor == start: break
			yield cycle

	def cycles(self, sort=True, fixpoints=True) -> list[list[int]]:
		'''
		expresses this permutation as a (normalized) product of disjoint cycles.

		normalization: each cycle begins with its minimal element. cycles are first
		sorted by size (if sort=True), and then by its minimal element.

		parameters:
		 - sort: if True, sort discovered cycles by descending size (cycles of the
		   same size are still solved by ascending minimal element, as noted above).
		 - fixpoints: if False, filter out 1-cycles (fixed points).
		'''
		cycles = self.cycles_iter()
		if not fixpoints:
			cycles = filter(lambda x: len(x) != 1, cycles)
		if sort:
			cycles = sorted(cycles, key=len, reverse=True)
		return list(cycles)

	def cycle_type(self) -> tuple[int, ...]:
		''' returns the cycle type (conjugation class) of this permutation in descending order '''
		return tuple(sorted(map(len, self.cycles_iter()), reverse=True))

	def order(self) -> int:
		return math.lcm(*map(len, self.cycles_iter()))

	def sign(self) -> int:
		''' returns the sign (0 → even, 1 → odd) of this permutation '''
		# a k-cycle is a product of k-1 transpositions
		return sum(len(c) - 1 for c in self.cycles_iter()) % 2

	def is_even(self) -> bool:
		return self.sign() == 0

	@classmethod
	def from_cycles(cls, cycles: Iterable[Sequence[int]], size: int) -> Self:
		'''
		construct a permutation of `0..size` from disjoint cycles. points not
		mentioned are fixed; 1-cycles are accepted and ignored.

		raises InvalidPermutationError if an index is out of range or the cycles overlap.
		'''
		cycles = [ list(c) for c in cycles ]
		for cycle in cycles:
			for i in cycle:
				if not (isinstance(i, int) and 0 <= i < size):
					logger.error('cycle index %s is out of bounds for size %d', i, size)
					raise InvalidPermutationError(f'cycle index {i} out of range for size {size}')
		result = list(range(size))
		for cycle in cycles:
			if len(cycle) < 2:
				continue
			for i, j in utils.circular_pairwise(cycle):
				result[i] = j
		if not utils.is_mapping_valid(result):
			logger.error('cycles %s are not disjoint', cycles)
			raise InvalidPermutationError(f'cycles {cycles} are not disjoint')
		return cls.unchecked(tuple(result))

	# special elements

	@classmethod
	def full_cycle(cls, size: int) -> Self:
		''' the full cycle permutation, `f(i) = (i + 1) % size` '''
		return cls.unchecked(tuple( (i+1) % size for i in range(size) ))

	# group action

	def __call__(self, x: int) -> int:
		''' interprets this permutation as a function from N_n to N_n '''
		assert isinstance(x, int) and 0 <= x < len(self._value)
		return self._value[x]

	def __len__(self):
		return len(self._value)
	def __getitem__(self, i):
		return self._value[i]
	def __iter__(self):
		return iter(self._value)

	# generation

	@classmethod
	def generate_group_heap(cls, size: int) -> list[Self]:
		'''
		all `size!` permutations, enumerated by Heap's algorithm.

		the algorithm keeps an explicit stack of swap counters, so it is
		inherently sequential. refuses sizes above HEAP_LIMIT.
		'''
		if size > cls.HEAP_LIMIT:
			logger.error('size %d is too large for heap algorithm, maximum is %d', size, cls.HEAP_LIMIT)
			raise OrderTooLargeError(f'size {size} is too large for heap algorithm (max {cls.HEAP_LIMIT})')
		if size == 0:
			return []
		arr = list(range(size))
		counters = [0] * size
		result = [cls.unchecked(tuple(arr))]
		i = 1
		while i < size:
			if counters[i] < i:
				j = 0 if i % 2 == 0 else counters[i]
				arr[j], arr[i] = arr[i], arr[j]
				result.append(cls.unchecked(tuple(arr)))
				counters[i] += 1
				i = 1
			else:
				counters[i] = 0
				i += 1
		return result

	@classmethod
	def generate_group(cls, size: int) -> list[Self]:
		'''
		all elements of the symmetric group S_size, by breadth-first closure
		from the transposition (0 1) and the full cycle (0 1 ... size-1),
		which generate it.
		'''
		if size == 0:
			return []
		if size == 1:
			return [cls.identity(1)]
		generators = [ cls.from_cycles([[0, 1]], size), cls.full_cycle(size) ]
		identity = cls.identity(size)
		seen = {identity}
		queue = collections.deque([identity])
		while queue:
			current = queue.popleft()
			for g in generators:
				x = current._mul(g)
				if x not in seen:
					seen.add(x)
					queue.append(x)
		logger.debug('generated S_%d with %d elements', size, len(seen))
		return list(seen)

	@classmethod
	def generate_alternating_group(cls, size: int) -> list[Self]:
		''' the even permutations of S_size '''
		return [ p for p in cls.generate_group(size) if p.is_even() ]

	@classmethod
	def generate_subgroup(cls, generators: Sequence[Self]) -> list[Self]:
		'''
		the subgroup generated by `generators`, by worklist closure under
		right multiplication by each generator. an empty generator list
		yields an empty list.

		raises DomainMismatchError if the generators have different sizes.
		'''
		if not generators:
			return []
		first = generators[0]
		for g in generators[1:]:
			first._check_domain(g)
		seen = set(generators)
		pending = list(generators)
		while pending:
			p = pending.pop()
			for g in generators:
				x = p._mul(g)
				if x not in seen:
					seen.add(x)
					pending.append(x)
		logger.debug('generated subgroup with %d elements from %d generators', len(seen), len(generators))
		return list(seen)


class AlternatingPermutation(Permutation):
	'''
	element of the alternating group A_n: an even permutation.

	the product and inverse of even permutations are even, so the inherited
	operations stay inside the class. multiplying by a plain `Permutation`
	yields a plain `Permutation`, and `checked_op` refuses to do it.
	'''

	def __init__(self, value: Iterable[int]):
		super().__init__(value)
		if not self.is_even():
			logger.error('cannot create alternating element from odd permutation %s', self._value)
			raise NotEvenPermutationError(f'{self.value_repr()} is an odd permutation')

	def _check_domain(self, other: Permutation):
		if not isinstance(other, AlternatingPermutation):
			logger.error('cannot operate alternating element with %s', type(other).__name__)
			raise DomainMismatchError(f'{type(other).__name__} is not an element of the alternating group')
		super()._check_domain(other)

	@classmethod
	def from_permutation(cls, p: Permutation) -> Self:
		return cls(p.value)

	def to_permutation(self) -> Permutation:
		return Permutation.unchecked(self._value)

	@classmethod
	def generate_group(cls, size: int) -> list[Self]:
		return [ cls.unchecked(p.value) for p in Permutation.generate_group(size) if p.is_even() ]


# SPARSE PERMUTATION
# ------------------

class SparsePermutation(Element):
	'''
	permutation of the naturals with finite support, stored as a dict of the
	moved points only. fixed points are dropped on construction so that the
	representation of each permutation is unique.

	uses the same composition convention as `Permutation`: `(a * b)(i) == a(b(i))`.
	'''

	_value: dict[int, int]

	@property
	def value(self) -> Mapping[int, int]:
		''' read-only view of the moved points '''
		return types.MappingProxyType(self._value)

	@property
	def support(self) -> list[int]:
		''' moved points, ascending '''
		return sorted(self._value)

	def __init__(self, mapping: Mapping[int, int] | None = None):
		mapping = { k: v for k, v in (mapping or {}).items() if k != v }
		if set(mapping) != set(mapping.values()) or any(not isinstance(k, int) or k < 0 for k in mapping):
			logger.error('invalid sparse mapping: %s', mapping)
			raise InvalidPermutationError(f'{mapping} is not a bijection on its support')
		self._value = mapping

	@classmethod
	def _make(cls, mapping: dict[int, int]) -> Self:
		x = cls.__new__(cls)
		x._value = { k: v for k, v in mapping.items() if k != v }
		return x

	@classmethod
	def from_cycles(cls, cycles: Iterable[Sequence[int]]) -> Self:
		mapping: dict[int, int] = {}
		for cycle in cycles:
			if len(cycle) < 2:
				continue
			for i, j in utils.circular_pairwise(cycle):
				if i in mapping:
					logger.error('cycles overlap at %d', i)
					raise InvalidPermutationError(f'cycles are not disjoint at {i}')
				mapping[i] = j
		return cls(mapping)

	@classmethod
	def from_dense(cls, p: Permutation) -> Self:
		return cls._make(dict(enumerate(p.value)))

	def to_dense(self, size: int) -> Permutation:
		''' dense form over `0..size`; the support must fit '''
		if self._value and max(self._value) >= size:
			raise InvalidPermutationError(f'support {self.support} does not fit in size {size}')
		return Permutation.unchecked(tuple( self._value.get(i, i) for i in range(size) ))

	def _cmpkey(self):
		return tuple(sorted(self._value.items()))

	def _check_domain(self, other: Self):
		# sparse permutations all act on the naturals
		pass

	def canonical_bytes(self) -> bytes:
		return b''.join(k.to_bytes(8, 'big') + v.to_bytes(8, 'big') for k, v in sorted(self._value.items()))

	@classmethod
	def identity(cls) -> Self:
		return cls._make({})

	@property
	def ID(self) -> Self:
		return type(self).identity()

	def _mul(self, other: Self) -> Self:
		result = dict(self._value)
		for k, v in other._value.items():
			result[k] = self._value.get(v, v)
		return type(self)._make(result)

	@property
	def inv(self) -> Self:
		return type(self)._make({ v: k for k, v in self._value.items() })

	def __call__(self, x: int) -> int:
		return self._value.get(x, x)

	def cycles(self) -> list[list[int]]:
		''' nontrivial cycles, each starting at its minimal element, ascending '''
		seen, result = set(), []
		for start in sorted(self._value):
			if start in seen:
				continue
			cycle, x = [], start
			while x not in seen:
				seen.add(x)
				cycle.append(x)
				x = self._value[x]
			result.append(cycle)
		return result

	def order(self) -> int:
		return math.lcm(*map(len, self.cycles()))

	def sign(self) -> int:
		return sum(len(c) - 1 for c in self.cycles()) % 2

	def __str__(self):
		cycles = self.cycles()
		if not cycles:
			return 'id'
		return ''.join('(' + ' '.join(map(str, c)) + ')' for c in cycles)

	def value_repr(self):
		return repr(dict(sorted(self._value.items())))


# APPLICATION-SPECIFIC
# --------------------

def cube_rotation_group() -> list[Permutation]:
	'''
	the 24 rotations of a cube, as permutations of its 8 vertices.

	vertices 0-3 go around the top face and 4-7 around the bottom face, with
	vertex `i + 4` below vertex `i`. generated by quarter turns about three axes.
	'''
	above = Permutation.from_cycles([[0, 1, 2, 3], [4, 5, 6, 7]], 8)
	front = Permutation.from_cycles([[0, 3, 7, 4], [1, 2, 6, 5]], 8)
	right = Permutation.from_cycles([[0, 1, 5, 4], [2, 6, 7, 3]], 8)
	return Permutation.generate_subgroup([above, front, right])
