from typing import Iterator, Iterable, Optional, Sequence, TypeVar
import math

T = TypeVar('T')

__all__ = [
	'gcd', 'lcm', 'extended_gcd', 'modular_inverse',
	'prime_factorization', 'is_mapping_valid',
	'circular_pairwise',
]


def circular_pairwise(x: Iterable[T]) -> Iterator[tuple[T, T]]:
	''' like pairwise, but with a trailing (last, first) entry '''
	x = iter(x)
	start = next(x)
	e1 = start
	for e2 in x:
		yield (e1, e2)
		e1 = e2
	yield (e1, start)


# NUMBER THEORY
# -------------

def gcd(a: int, b: int) -> int:
	return math.gcd(a, b)

def lcm(a: int, b: int) -> int:
	return math.lcm(a, b)

def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
	'''
	returns `(g, u, v)` such that `g == gcd(a, b) == u*a + v*b`.

	iterative version of the extended euclidean algorithm.
	'''
	old_r, r = a, b
	old_u, u = 1, 0
	old_v, v = 0, 1
	while r:
		q = old_r // r
		old_r, r = r, old_r - q * r
		old_u, u = u, old_u - q * u
		old_v, v = v, old_v - q * v
	if old_r < 0:
		old_r, old_u, old_v = -old_r, -old_u, -old_v
	return old_r, old_u, old_v

def modular_inverse(a: int, n: int) -> Optional[int]:
	''' inverse of `a` modulo `n` in the range `0..n`, or None if `gcd(a, n) != 1` '''
	assert n > 0, 'modulus must be positive'
	g, u, _ = extended_gcd(a % n, n)
	if g != 1:
		return None
	return u % n

def prime_factorization(n: int) -> list[tuple[int, int]]:
	'''
	factors `n` into `(prime, exponent)` pairs by trial division, in ascending
	order of primes. `1` has the empty factorization.
	'''
	assert n > 0, f'cannot factor {n}'
	result = []
	p = 2
	while p * p <= n:
		if n % p == 0:
			e = 0
			while n % p == 0:
				n //= p
				e += 1
			result.append((p, e))
		p += 1 if p == 2 else 2
	if n > 1:
		result.append((n, 1))
	return result

def is_mapping_valid(mapping: Sequence[int]) -> bool:
	''' checks whether `mapping` is a bijection of `0..len(mapping)` onto itself '''
	n = len(mapping)
	seen = [False] * n
	for x in mapping:
		if not (isinstance(x, int) and 0 <= x < n) or seen[x]:
			return False
		seen[x] = True
	return True
