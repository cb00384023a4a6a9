from typing import Self
from typing import ClassVar
import logging

from .element import Element
from .errors import DomainMismatchError, NotAMemberError, ZeroModulusError
from . import utils

__all__ = ['Residue', 'AdditiveResidue', 'MultiplicativeResidue']

logger = logging.getLogger(__name__)


# RESIDUES
# --------

class Residue(Element):
	'''
	integer residue modulo `n`.

	the representation (value, modulus) is shared by both operation kinds;
	the law is selected by the concrete subclass, so an additive and a
	multiplicative residue never compare equal nor combine.
	'''

	SYMBOL: ClassVar[str]
	''' symbol of the operation, used for display (must be defined by child) '''
	IDENTITY_VALUE: ClassVar[int]
	''' value of the identity element (must be defined by child) '''

	_value: int
	_modulus: int

	@property
	def value(self) -> int:
		return self._value

	@property
	def modulus(self) -> int:
		return self._modulus

	def __init__(self, value: int, modulus: int):
		if not (isinstance(value, int) and isinstance(modulus, int)):
			raise TypeError(f'residue needs integers, got {value!r} mod {modulus!r}')
		if modulus <= 0:
			logger.error('modulus cannot be %d', modulus)
			raise ZeroModulusError(f'modulus must be positive, got {modulus}')
		value %= modulus
		if not type(self).is_valid(value, modulus):
			logger.error('%d is not a valid element mod %d for %s', value, modulus, type(self).__name__)
			raise NotAMemberError(f'{value} is not in {type(self).__name__}({modulus})')
		self._value = value
		self._modulus = modulus

	@classmethod
	def _make(cls, value: int, modulus: int) -> Self:
		''' construct without validation (value must already be reduced and valid) '''
		x = cls.__new__(cls)
		x._value = value
		x._modulus = modulus
		return x

	@classmethod
	def is_valid(cls, value: int, modulus: int) -> bool:
		''' whether a reduced value is a member of the group modulo `modulus` '''
		return True

	@classmethod
	def identity(cls, modulus: int) -> Self:
		return cls._make(cls.IDENTITY_VALUE % modulus, modulus)

	@property
	def ID(self) -> Self:
		return type(self).identity(self._modulus)

	def _cmpkey(self):
		return (self._value, self._modulus)

	def _check_domain(self, other: Self):
		if self._modulus != other._modulus:
			logger.error('modulus mismatch: %d != %d', self._modulus, other._modulus)
			raise DomainMismatchError(f'modulus mismatch: {self._modulus} != {other._modulus}')

	def canonical_bytes(self) -> bytes:
		''' value and modulus as 8 bytes big-endian each, so moduli must stay below 2**64 '''
		return self._value.to_bytes(8, 'big') + self._modulus.to_bytes(8, 'big')

	# formatting

	def __str__(self):
		return f'{self._value} (mod {self._modulus}){type(self).SYMBOL}'

	def value_repr(self) -> str:
		return f'{self._value}, {self._modulus}'

	def __int__(self) -> int:
		return self._value

	@classmethod
	def generate_group(cls, modulus: int) -> list[Self]:
		''' all members of the group modulo `modulus`, in ascending order '''
		if modulus <= 0:
			logger.error('cannot generate group with modulus %d', modulus)
			raise ZeroModulusError(f'modulus must be positive, got {modulus}')
		return [ cls._make(k, modulus) for k in range(modulus) if cls.is_valid(k, modulus) ]


class AdditiveResidue(Residue):
	''' element of the cyclic group Z_n under addition '''

	SYMBOL = '+'
	IDENTITY_VALUE = 0

	def _mul(self, other: Self) -> Self:
		assert self._modulus == other._modulus, 'modulus must match for operation'
		return type(self)._make((self._value + other._value) % self._modulus, self._modulus)

	@property
	def inv(self) -> Self:
		return type(self)._make((self._modulus - self._value) % self._modulus, self._modulus)

	def _pow(self, x: int) -> Self:
		return type(self)._make((self._value * x) % self._modulus, self._modulus)

	def order(self) -> int:
		return self._modulus // utils.gcd(self._modulus, self._value)


class MultiplicativeResidue(Residue):
	''' element of the group of units (Z/nZ)* under multiplication '''

	SYMBOL = '×'
	IDENTITY_VALUE = 1

	@classmethod
	def is_valid(cls, value: int, modulus: int) -> bool:
		return utils.gcd(value, modulus) == 1

	def _mul(self, other: Self) -> Self:
		assert self._modulus == other._modulus, 'modulus must match for operation'
		return type(self)._make((self._value * other._value) % self._modulus, self._modulus)

	@property
	def inv(self) -> Self:
		inverse = utils.modular_inverse(self._value, self._modulus)
		assert inverse is not None, f'{self} has no inverse'
		return type(self)._make(inverse, self._modulus)

	def order(self) -> int:
		# orders divide phi(n), so the naive loop is bounded by the group order
		k, acc = 1, self._value
		while acc != 1 % self._modulus:
			acc = (acc * self._value) % self._modulus
			k += 1
		return k
