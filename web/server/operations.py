"""Hex-encoded entry points used by the presentation layer.

Integers travel as lowercase big-endian hex without padding: private keys as
a bare string, public keys as {"x", "y"} and signatures as {"r", "s"}.
"""

import logging
import re
import time

import p256_ecdsa
from p256_curve import P256, Affine
from p256_errors import InvalidInput, InvalidPrivateKey, InvalidPublicKey
from p256_keys import derive_key_pair

logger = logging.getLogger(__name__)

HEX_PATTERN = re.compile(r"[0-9a-fA-F]+")


def to_hex(value: int) -> str:
	return format(value, "x")


def from_hex(value, what: str) -> int:
	if not isinstance(value, str) or not HEX_PATTERN.fullmatch(value):
		raise InvalidInput(f"{what} must be a non-empty hex string")
	return int(value, 16)


def _public_key_from_dict(public_key) -> Affine:
	try:
		x_hex, y_hex = public_key["x"], public_key["y"]
	except (KeyError, TypeError):
		raise InvalidInput("public key must have 'x' and 'y' fields") from None
	x = from_hex(x_hex, "public key x")
	y = from_hex(y_hex, "public key y")
	if not (0 <= x < P256.p and 0 <= y < P256.p):
		raise InvalidPublicKey("public key coordinates must be in [0, p-1]")
	return Affine(x, y)


def _signature_from_dict(signature) -> p256_ecdsa.Signature:
	try:
		r_hex, s_hex = signature["r"], signature["s"]
	except (KeyError, TypeError):
		raise InvalidInput("signature must have 'r' and 's' fields") from None
	return p256_ecdsa.Signature(from_hex(r_hex, "signature r"), from_hex(s_hex, "signature s"))


def derive_keys(seed: str, salt: str):
	"""Return (private_key_hex, {"x": x_hex, "y": y_hex}) derived from seed and salt."""
	pair = derive_key_pair(seed, salt)
	public_key = {"x": to_hex(pair.public_key.x), "y": to_hex(pair.public_key.y)}
	return to_hex(pair.private_key), public_key


def sign(private_key_hex: str, message: str) -> dict:
	"""Sign message and return {"r": r_hex, "s": s_hex}."""
	d = from_hex(private_key_hex, "private key")
	if not 1 <= d <= P256.n - 1:
		raise InvalidPrivateKey("private key must be in [1, n-1]")

	start = time.perf_counter()
	signature = p256_ecdsa.sign(d, message)
	logger.debug("sign took %.2f ms", (time.perf_counter() - start) * 1000)

	return {"r": to_hex(signature.r), "s": to_hex(signature.s)}


def verify(public_key: dict, message: str, signature: dict) -> bool:
	"""True if signature is valid for message under public_key."""
	point = _public_key_from_dict(public_key)
	sig = _signature_from_dict(signature)

	start = time.perf_counter()
	valid = p256_ecdsa.verify(point, message, sig)
	logger.debug("verify took %.2f ms", (time.perf_counter() - start) * 1000)

	return valid


def render_result(valid: bool) -> dict:
	"""Presentation model for a verification outcome."""
	return {
		"type": "verify_result",
		"valid": bool(valid),
		"status": "valid" if valid else "invalid",
		"color": "green" if valid else "red",
	}
