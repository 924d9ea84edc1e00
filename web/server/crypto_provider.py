"""Hash and entropy source used by key derivation and signing."""

import os

from cryptography.hazmat.primitives import hashes

from p256_errors import SignatureError


class CryptoProvider:
	"""SHA-256 digests from `cryptography` and random bytes from the OS."""

	digest_size = 32

	def digest(self, data: bytes) -> bytes:
		h = hashes.Hash(hashes.SHA256())
		h.update(data)
		return h.finalize()

	def secure_random_bytes(self, n: int) -> bytes:
		return os.urandom(n)


def checked_digest(provider: CryptoProvider, data: bytes) -> bytes:
	"""provider.digest(data), rejected unless it is exactly digest_size bytes."""
	h = provider.digest(data)
	if len(h) != CryptoProvider.digest_size:
		raise SignatureError(f"hash provider returned {len(h)} bytes, expected {CryptoProvider.digest_size}")
	return h


default_provider = CryptoProvider()
