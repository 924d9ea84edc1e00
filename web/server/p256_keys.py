"""Deterministic key pair derivation from a seed and a salt."""

import logging
from dataclasses import dataclass

from crypto_provider import CryptoProvider, checked_digest, default_provider
from p256_curve import INFINITY, P256, Affine, CurveParameters, point_mult, validate_point
from p256_errors import InvalidInput, InvalidPublicKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyPair:
	private_key: int
	public_key: Affine


def derive_private_key(seed: str, salt: str, curve: CurveParameters = P256,
		provider: CryptoProvider = default_provider) -> int:
	"""Hash seed || salt and reduce modulo n, retrying until the result is in [1, n-1].

	A rejected candidate is replaced by the hash of seed || salt || counter,
	with the counter as 4 big-endian bytes starting at 1, so the loop
	always moves to a fresh hash input.
	"""
	if not seed or not salt:
		raise InvalidInput("seed and salt must both be non-empty")

	material = (seed + salt).encode("utf-8")
	counter = 0
	while True:
		data = material if counter == 0 else material + counter.to_bytes(4, "big")
		candidate = int.from_bytes(checked_digest(provider, data), "big") % curve.n
		if 1 <= candidate <= curve.n - 1:
			return candidate
		counter += 1
		logger.debug("Rejected key candidate, retrying with counter %d", counter)


def derive_key_pair(seed: str, salt: str, curve: CurveParameters = P256,
		provider: CryptoProvider = default_provider) -> KeyPair:
	"""Derive the private scalar d and the public point d*G."""
	d = derive_private_key(seed, salt, curve, provider)
	public_key = point_mult(d, curve.g, curve)
	if public_key is INFINITY or not validate_point(public_key, curve):
		raise InvalidPublicKey("derived public key is not a valid curve point")
	return KeyPair(d, public_key)
