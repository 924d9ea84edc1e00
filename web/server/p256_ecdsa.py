"""ECDSA signing and verification over P-256 with SHA-256 message hashing."""

import logging
from dataclasses import dataclass
from typing import Union

from cryptography.hazmat.primitives import constant_time

from crypto_provider import CryptoProvider, checked_digest, default_provider
from p256_curve import INFINITY, P256, Affine, CurveParameters, point_add, point_mult, validate_point
from p256_errors import (
	InvalidInput,
	InvalidPrivateKey,
	InvalidPublicKey,
	InvalidSignatureRange,
)
from p256_field import mod, mod_inv, mod_mult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Signature:
	r: int
	s: int


def _message_bytes(message: Union[str, bytes]) -> bytes:
	if isinstance(message, str):
		return message.encode("utf-8")
	if isinstance(message, (bytes, bytearray)):
		return bytes(message)
	raise TypeError("message must be str or bytes-like")


def hash_message(message: Union[str, bytes], provider: CryptoProvider = default_provider) -> int:
	"""Digest of the message as a big-endian integer, without truncation or reduction."""
	return int.from_bytes(checked_digest(provider, _message_bytes(message)), "big")


def fixed_width_hex(value: int, curve: CurveParameters = P256) -> str:
	"""Lowercase hex of value padded to the byte length of the group order."""
	return value.to_bytes(curve.byte_length, "big").hex()


def constant_time_compare(a: str, b: str) -> bool:
	"""Equality of two strings in time independent of where they differ.

	Strings of unequal length compare unequal.
	"""
	return constant_time.bytes_eq(a.encode("utf-8"), b.encode("utf-8"))


def _draw_ephemeral_scalar(curve: CurveParameters, provider: CryptoProvider) -> int:
	buf = bytearray(provider.secure_random_bytes(curve.byte_length))
	try:
		return int.from_bytes(buf, "big") % curve.n
	finally:
		buf[:] = bytes(len(buf))


def sign(private_key: int, message: Union[str, bytes], curve: CurveParameters = P256,
		provider: CryptoProvider = default_provider) -> Signature:
	"""Sign message with the private scalar.

	A fresh k is drawn for every attempt. It is drawn again whenever k, r or
	s comes out as zero, and the reference to it is dropped on every exit path.
	"""
	n = curve.n
	if isinstance(private_key, bool) or not isinstance(private_key, int) or not 1 <= private_key <= n - 1:
		raise InvalidPrivateKey("private key must be an integer in [1, n-1]")
	if not message:
		raise InvalidInput("message must be non-empty")

	e = hash_message(message, provider)

	while True:
		k = _draw_ephemeral_scalar(curve, provider)
		try:
			if k == 0:
				logger.debug("Drew k = 0, drawing again")
				continue
			point = point_mult(k, curve.g, curve)
			if point is INFINITY:
				continue
			r = mod(point.x, n)
			if r == 0:
				logger.debug("r = 0, drawing a new k")
				continue
			s = mod_mult(e + r * private_key, mod_inv(k, n), n)
			if s == 0:
				logger.debug("s = 0, drawing a new k")
				continue
			return Signature(r, s)
		finally:
			k = None


def verify(public_key: Affine, message: Union[str, bytes], signature: Signature,
		curve: CurveParameters = P256, provider: CryptoProvider = default_provider) -> bool:
	"""Verify an ECDSA signature (r, s) for message with public key Q.

	Returns False for a well-formed signature that does not match. Raises
	InvalidSignatureRange if r or s is outside [1, n-1] and InvalidPublicKey
	if Q is the identity or off the curve.
	"""
	n = curve.n
	r, s = signature.r, signature.s

	# Check signature range
	if not (1 <= r <= n - 1 and 1 <= s <= n - 1):
		raise InvalidSignatureRange("signature components must be in [1, n-1]")

	if public_key is INFINITY or not validate_point(public_key, curve):
		raise InvalidPublicKey("public key is not a valid curve point")

	e = hash_message(message, provider)
	w = mod_inv(s, n)
	u1 = mod_mult(e, w, n)
	u2 = mod_mult(r, w, n)

	point = point_add(point_mult(u1, curve.g, curve), point_mult(u2, public_key, curve), curve)
	if point is INFINITY:
		logger.debug("u1*G + u2*Q is the point at infinity")
		return False

	x_p = mod(point.x, n)
	valid = constant_time_compare(fixed_width_hex(x_p, curve), fixed_width_hex(r, curve))
	logger.debug("Signature is %s", "valid" if valid else "invalid")
	return valid
