"""Short-Weierstrass curve y^2 = x^3 + a*x + b over GF(p), with the P-256 constants.

Points are either the identity INFINITY or an Affine(x, y) pair. Every
function takes the curve as an argument and defaults to P256.
"""

from dataclasses import dataclass
from typing import Union

from p256_errors import InvalidInput
from p256_field import mod, mod_inv, mod_mult, mod_sub


class _Infinity:
	"""The point at infinity, identity of the group law."""

	_instance = None

	def __new__(cls):
		if cls._instance is None:
			cls._instance = super().__new__(cls)
		return cls._instance

	def __repr__(self):
		return "INFINITY"


INFINITY = _Infinity()


@dataclass(frozen=True)
class Affine:
	x: int
	y: int


Point = Union[_Infinity, Affine]


@dataclass(frozen=True)
class CurveParameters:
	name: str
	p: int
	a: int
	b: int
	g: Affine
	n: int

	@property
	def byte_length(self) -> int:
		return (self.n.bit_length() + 7) // 8


# === P-256 curve parameters ===
P256 = CurveParameters(
	name="P-256",
	p=0xffffffff00000001000000000000000000000000ffffffffffffffffffffffff,
	a=0xffffffff00000001000000000000000000000000fffffffffffffffffffffffc,
	b=0x5ac635d8aa3a93e7b3ebbd55769886bc651d06b0cc53b0f63bce3c3e27d2604b,
	g=Affine(
		0x6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296,
		0x4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5,
	),
	n=0xffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551,
)


def validate_point(point: Point, curve: CurveParameters = P256) -> bool:
	"""Check y^2 = x^3 + a*x + b (mod p). The identity counts as valid."""
	if point is INFINITY:
		return True
	x, y = point.x, point.y
	lhs = mod(y * y, curve.p)
	rhs = mod(x * x * x + curve.a * x + curve.b, curve.p)
	return lhs == rhs


def point_add(p1: Point, p2: Point, curve: CurveParameters = P256) -> Point:
	"""Point addition on the curve, doubling when both operands are equal."""
	if p1 is INFINITY:
		return p2
	if p2 is INFINITY:
		return p1

	p = curve.p

	# P + (-P) = INF
	if p1.x == p2.x and mod(p1.y + p2.y, p) == 0:
		return INFINITY

	if p1.x == p2.x and p1.y == p2.y:
		num = mod(3 * p1.x * p1.x + curve.a, p)
		lam = mod_mult(num, mod_inv(2 * p1.y, p), p)
	else:
		num = mod_sub(p2.y, p1.y, p)
		lam = mod_mult(num, mod_inv(mod_sub(p2.x, p1.x, p), p), p)

	x3 = mod(lam * lam - p1.x - p2.x, p)
	y3 = mod(lam * mod_sub(p1.x, x3, p) - p1.y, p)
	return Affine(x3, y3)


def point_mult(k: int, point: Point, curve: CurveParameters = P256) -> Point:
	"""Multiply a point by an integer k using double-and-add.

	Bits of k are consumed least significant first. The running time depends
	on the bit pattern of k. k is not reduced modulo n.
	"""
	if k < 0:
		raise InvalidInput("negative scalar not supported")

	result = INFINITY
	addend = point

	while k:
		if k & 1:
			result = point_add(result, addend, curve)
		addend = point_add(addend, addend, curve)
		k >>= 1

	return result
