from typing import Self
import logging

from .element import Element
from .errors import DomainMismatchError, ZeroModulusError
from . import utils

__all__ = ['Dihedral']

logger = logging.getLogger(__name__)


# DIHEDRAL GROUP
# --------------

class Dihedral(Element):
	'''
	symmetry of a regular n-gon, as `r^rotation * s^reflection` where `r` is
	the rotation by one vertex and `s` a fixed reflection.

	since `s * r == r^-1 * s`, composing after a reflection reverses the
	sense of the following rotation:

		(a, x) * (b, y) == (a + (-1)^x * b, x xor y)
	'''

	_rotation: int
	_reflection: bool
	_n: int

	def __init__(self, rotation: int, reflection: bool, n: int):
		if n <= 0:
			logger.error('polygon size cannot be %d', n)
			raise ZeroModulusError(f'polygon size must be positive, got {n}')
		self._rotation = rotation % n
		self._reflection = bool(reflection)
		self._n = n

	@classmethod
	def _make(cls, rotation: int, reflection: bool, n: int) -> Self:
		x = cls.__new__(cls)
		x._rotation, x._reflection, x._n = rotation, reflection, n
		return x

	@property
	def rotation(self) -> int:
		return self._rotation

	@property
	def is_reflection(self) -> bool:
		return self._reflection

	@property
	def n(self) -> int:
		''' number of sides of the polygon '''
		return self._n

	def _cmpkey(self):
		return (self._n, self._reflection, self._rotation)

	def _check_domain(self, other: Self):
		if self._n != other._n:
			logger.error('size mismatch: %d != %d', self._n, other._n)
			raise DomainMismatchError(f'polygon size mismatch: {self._n} != {other._n}')

	def canonical_bytes(self) -> bytes:
		return self._rotation.to_bytes(8, 'big') + bytes([self._reflection]) + self._n.to_bytes(8, 'big')

	def __str__(self):
		return ('s' if self._reflection else 'r') + str(self._rotation)

	def value_repr(self):
		return f'{self._rotation}, {self._reflection}, {self._n}'

	# group operations

	@classmethod
	def identity(cls, n: int) -> Self:
		return cls._make(0, False, n)

	@property
	def ID(self) -> Self:
		return type(self).identity(self._n)

	def _mul(self, other: Self) -> Self:
		assert self._n == other._n, 'cannot operate on elements with different n values'
		b = -other._rotation if self._reflection else other._rotation
		return type(self)._make((self._rotation + b) % self._n, self._reflection ^ other._reflection, self._n)

	@property
	def inv(self) -> Self:
		if self._reflection:
			return self # a reflection is its own inverse
		return type(self)._make((-self._rotation) % self._n, False, self._n)

	def order(self) -> int:
		if self._reflection:
			return 2
		if self._rotation == 0:
			return 1
		return self._n // utils.gcd(self._n, self._rotation)

	@classmethod
	def generate_group(cls, n: int) -> list[Self]:
		''' the 2n elements of D_n: all rotations, then all reflections '''
		if n <= 0:
			logger.error('polygon size cannot be %d', n)
			raise ZeroModulusError(f'polygon size must be positive, got {n}')
		return [ cls._make(i, reflection, n) for reflection in (False, True) for i in range(n) ]
