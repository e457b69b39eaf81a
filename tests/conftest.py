import random
from typing import List

import pytest


class ScriptedSource:
    """Returns pre-set values in order, for exact-output tests."""

    def __init__(self, uint32: List[int] = (), data: bytes = b""):
        self.uint32 = list(uint32)
        self.data = data
        self.calls = []

    def next_uniform32(self, n):
        self.calls.append(("uint32", n))
        out, self.uint32 = self.uint32[:n], self.uint32[n:]
        assert len(out) == n, "script ran out of values"
        return out

    def next_bytes(self, n):
        self.calls.append(("bytes", n))
        out, self.data = self.data[:n], self.data[n:]
        assert len(out) == n, "script ran out of bytes"
        return out


class SeededSource:
    """Deterministic, NOT secure. Tests only."""

    def __init__(self, seed: int = 1234):
        self._rng = random.Random(seed)

    def next_uniform32(self, n):
        return [self._rng.getrandbits(32) for _ in range(n)]

    def next_bytes(self, n):
        return self._rng.randbytes(n)


@pytest.fixture
def seeded_source():
    return SeededSource()


@pytest.fixture
def scripted_source():
    return ScriptedSource
