from typing import Self
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional

from .errors import DomainMismatchError

__all__ = ['Element']


# ELEMENT
# -------

class Element(ABC):
	'''
	Base class for elements of finite groups.

	Unlike a class-per-group design, the domain of an element (its modulus,
	its size...) is carried by the instance. Combining elements of different
	domains is a programmer error for the unchecked operation (`*`), which
	only asserts; `checked_op` raises `DomainMismatchError` instead and should
	be used wherever external input drives the operation.

	Associativity and the identity / inverse laws are never verified, they
	are trusted to hold for every subclass.

	This class is hashable, which means all subclasses are expected to be immutable.
	'''

	POW_ORDER_THRESHOLD: ClassVar[Optional[int]] = 4
	''' exponents above this (in absolute value) are reduced modulo the element order '''

	# formatting

	def __str__(self):
		'''
		the default str() implementation just returns `value_repr()`
		'''
		return self.value_repr()

	def __repr__(self):
		return type(self).__name__ + f'({self.value_repr()})'

	def value_repr(self) -> str:
		'''
		returns the representation of the arguments to be passed to the constructor.
		used by the default `__repr__` and `__str__` implementations.
		'''
		return repr(self._cmpkey())

	# core group operations:

	@property
	@abstractmethod
	def ID(self) -> Self:
		''' identity element of the group this element belongs to '''

	@abstractmethod
	def _mul(self, other: Self) -> Self:
		''' the group operation

		internal method; users should use the `*` operator or `op`.
		implementations only assert that `other` lives in the same domain. '''

	@property
	@abstractmethod
	def inv(self) -> Self:
		''' inverse element. equivalent to the notation `x ** -1` '''

	@abstractmethod
	def _check_domain(self, other: Self):
		''' raise DomainMismatchError if `other` can't be operated with this element '''

	@abstractmethod
	def canonical_bytes(self) -> bytes:
		'''
		deterministic byte encoding of this element. equal elements must produce
		equal encodings; the lexicographic order of the encodings is used as a
		total order for element types that have no natural one.

		integers are encoded as fixed 8-byte big-endian words; values of 2**64
		or more raise OverflowError.
		'''

	def op(self, other: Self) -> Self:
		''' unchecked group operation, same as `self * other` '''
		return self._mul(other)

	def checked_op(self, other: Any) -> Self:
		''' fallible group operation: raises DomainMismatchError instead of asserting '''
		if not isinstance(other, type(self)) and not isinstance(self, type(other)):
			raise DomainMismatchError(f'cannot operate {type(self).__name__} with {type(other).__name__}')
		self._check_domain(other)
		return self._mul(other)

	# comparison / equality / hashing

	def __hash__(self):
		return self._cmpkey().__hash__()

	@abstractmethod
	def _cmpkey(self):
		'''
		internal method to return comparison key, to which comparison & hashing
		methods will delegate. the key must include the domain of the element.
		'''

	def __lt__(self, other: Self):
		if not isinstance(other, type(self)):
			return NotImplemented
		return self._cmpkey().__lt__(type(self)._cmpkey(other))

	def __le__(self, other: Self):
		if not isinstance(other, type(self)):
			return NotImplemented
		return self._cmpkey().__le__(type(self)._cmpkey(other))

	def __gt__(self, other: Self):
		if not isinstance(other, type(self)):
			return NotImplemented
		return self._cmpkey().__gt__(type(self)._cmpkey(other))

	def __ge__(self, other: Self):
		if not isinstance(other, type(self)):
			return NotImplemented
		return self._cmpkey().__ge__(type(self)._cmpkey(other))

	def __eq__(self, other: Self):
		if not isinstance(other, type(self)):
			return NotImplemented
		return self._cmpkey().__eq__(type(self)._cmpkey(other))

	def __ne__(self, other: Self):
		if not isinstance(other, type(self)):
			return NotImplemented
		return self._cmpkey().__ne__(type(self)._cmpkey(other))

	# optional auxiliary operations

	def order(self) -> int:
		'''
		returns the order of this element (lowest non-zero natural `x`
		satisfying `self ** x == ID`).

		the default implementation multiplies until reaching the identity;
		subclasses should override it when there's a closed formula.
		'''
		k, acc = 1, self
		while acc:
			acc = acc._mul(self)
			k += 1
		return k

	def _pow(self, x: int) -> Self:
		'''
		raises an element to an integer power (may be negative). the default
		implementation uses exponentiation by squaring (together with an optional
		inverse), and it may be overriden if there are more efficient ways to calculate
		powers.

		internal method; users should use `self ** x` notation, which validates for
		integers.
		'''
		# for non-small exponents, round to modulo order of the element
		threshold = type(self).POW_ORDER_THRESHOLD
		if threshold and abs(x) > threshold:
			order = self.order()
			if abs(x) >= order:
				x = x % order
		# for negative exponents, invert the base
		if x < 0:
			self = self.inv
			x = -x
		# exponentiation by squaring
		result = self.ID
		mult = self
		while True:
			if x & 1: result = result._mul(mult)
			x >>= 1
			if not x: break
			mult = mult._mul(mult)
		return result

	# operations provided by the implementation

	def __bool__(self):
		return self != self.ID

	def __mul__(self, other: Self) -> Self:
		if isinstance(other, type(self)):
			return self._mul(other)
		return NotImplemented

	def __rmul__(self, other: Self) -> Self:
		if isinstance(other, type(self)):
			return type(self)._mul(other, self)
		return NotImplemented

	def __pow__(self, other: int) -> Self:
		if not isinstance(other, int):
			return NotImplemented
		if other == -1:
			# to allow `x ** -1` notation
			return self.inv
		return self._pow(other)

	def conj(self, other: Self) -> Self:
		''' (left) conjugate an element using this element: equivalent to `self.inv * other * self` '''
		return self.inv * other * self

	def conj_by(self, other: Self) -> Self:
		''' (left) conjugate this element by `other`: equivalent to `other.inv * self * other` '''
		return type(self).conj(other, self)

	def comm(self, other: Self) -> Self:
		''' obtains a commutator element: equivalent to `self.inv * other.inv * self * other` '''
		return self.inv * other.inv * self * other
