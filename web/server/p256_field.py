"""Modular arithmetic over a prime modulus.

Curve coordinates are reduced with the field prime p, scalars with the group
order n. The caller picks the modulus; nothing here checks which one it got.
"""

from p256_errors import ModularInverseUndefined


def mod(a: int, m: int) -> int:
	"""Reduce a into [0, m-1], also for negative a."""
	# m > 0, so the result of % is already non-negative
	return a % m


def mod_add(a: int, b: int, m: int) -> int:
	return mod(a + b, m)


def mod_sub(a: int, b: int, m: int) -> int:
	return mod(a - b, m)


def mod_mult(a: int, b: int, m: int) -> int:
	return mod(a * b, m)


def mod_inv(a: int, p: int) -> int:
	"""Modular inverse using extended Euclidean algorithm.

	Returns t with 0 < t < p and a*t = 1 (mod p).
	"""
	a = mod(a, p)
	if a == 0:
		raise ModularInverseUndefined("modular inverse is not defined for 0")

	t, new_t = 0, 1
	r, new_r = p, a

	while new_r != 0:
		q = r // new_r
		t, new_t = new_t, t - q * new_t
		r, new_r = new_r, r - q * new_r

	# r is gcd(a, p)
	if r != 1:
		raise ModularInverseUndefined("element is not invertible")

	return mod(t, p)
