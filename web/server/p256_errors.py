"""Error kinds raised by the P-256 signature core."""


class SignatureError(Exception):
	"""Base class for every failure raised by the signature core."""


class InvalidInput(SignatureError, ValueError):
	"""Empty seed, salt or message, or a malformed encoded value."""


class InvalidPrivateKey(SignatureError, ValueError):
	"""Private scalar outside [1, n-1]."""


class InvalidPublicKey(SignatureError, ValueError):
	"""Public point is off the curve or is the point at infinity."""


class ModularInverseUndefined(SignatureError, ArithmeticError):
	"""The element has no inverse for the given modulus."""


class InvalidSignatureRange(SignatureError, ValueError):
	"""Signature component r or s outside [1, n-1]."""
