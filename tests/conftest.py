import hashlib

import pytest

from crypto_provider import CryptoProvider


class ScriptedProvider(CryptoProvider):
    """Real SHA-256, but digests and random bytes can be overridden per call."""

    def __init__(self, digests=None, random_chunks=None):
        self.digests = dict(digests or {})
        self.random_chunks = list(random_chunks or [])
        self.digest_inputs = []
        self.random_requests = []

    def digest(self, data: bytes) -> bytes:
        self.digest_inputs.append(data)
        if data in self.digests:
            return self.digests[data]
        return hashlib.sha256(data).digest()

    def secure_random_bytes(self, n: int) -> bytes:
        self.random_requests.append(n)
        return self.random_chunks.pop(0)


@pytest.fixture
def scripted_provider():
    return ScriptedProvider
