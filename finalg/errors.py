'''
exception taxonomy.

checked constructors and `checked_op` raise one of these; the unchecked fast
paths (`*`, `_mul`, `inv`) only `assert`, and the caller is responsible for
combining elements of compatible domains.
'''

__all__ = [
	'AlgebraError',
	'DomainMismatchError',
	'NotAMemberError', 'ZeroModulusError', 'InvalidPermutationError', 'NotEvenPermutationError',
	'StructureError', 'NotClosedError', 'NotNormalError', 'NotProperSubgroupError',
	'NotAbelianError', 'InvalidSubgroupError', 'MixedCosetSideError',
	'DifferentSubgroupError', 'HomomorphismPropertyError',
	'IdentityNotFoundError',
	'OrderTooLargeError',
]


class AlgebraError(Exception):
	''' base class for every error raised by this package '''


# domain mismatch

class DomainMismatchError(AlgebraError, ValueError):
	''' elements from incompatible domains (modulus, size, component count...) were combined '''


# membership violations

class NotAMemberError(AlgebraError, ValueError):
	''' a value does not describe an element of the requested group '''

class ZeroModulusError(NotAMemberError):
	''' modulus (or polygon size) must be positive '''

class InvalidPermutationError(NotAMemberError):
	''' mapping is not a bijection, or cycles overlap / fall out of range '''

class NotEvenPermutationError(NotAMemberError):
	''' an odd permutation was given where an alternating group element was expected '''


# structural violations

class StructureError(AlgebraError):
	''' a collection of elements (or a map between them) lacks a required algebraic property '''

class NotClosedError(StructureError):
	pass

class NotNormalError(StructureError):
	pass

class NotProperSubgroupError(StructureError):
	''' the subgroup equals the whole group '''

class NotAbelianError(StructureError):
	pass

class InvalidSubgroupError(StructureError):
	pass

class MixedCosetSideError(StructureError):
	''' a left coset was combined with a right coset '''

class DifferentSubgroupError(StructureError):
	''' two cosets of different subgroups were combined '''

class HomomorphismPropertyError(StructureError):
	''' `f(a * b) != f(a) * f(b)` for some pair '''

	def __init__(self, a, b, lhs, rhs):
		super().__init__(f'f({a} * {b}) = {lhs} but f({a}) * f({b}) = {rhs}')
		self.a, self.b = a, b
		self.lhs, self.rhs = lhs, rhs


# not found

class IdentityNotFoundError(AlgebraError, LookupError):
	pass


# resource limits

class OrderTooLargeError(AlgebraError, ValueError):
	pass
