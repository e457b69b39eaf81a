# core/random_utils.py
from __future__ import annotations
import secrets
from typing import List, Optional, Protocol

from loguru import logger


class EntropyUnavailableError(RuntimeError):
    """The host cannot supply cryptographically secure randomness."""


class SecureRandomSource(Protocol):
    def next_uniform32(self, n: int) -> List[int]: ...

    def next_bytes(self, n: int) -> bytes: ...


def _check_count(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"Draw count must be an integer, got {n!r}")
    if n < 0:
        raise ValueError(f"Draw count must be non-negative, got {n}")


def _entropy_failure(e: NotImplementedError) -> EntropyUnavailableError:
    logger.error("OS entropy source unavailable: {}", e)
    return EntropyUnavailableError("No secure entropy source on this host")


class SystemRandomSource:
    """
    Draws from the OS CSPRNG through the `secrets` module.

    Holds no state, so one instance can be shared between threads.
    There is no fallback to `random.Random`: if the OS source is
    missing, EntropyUnavailableError is raised.
    """

    def next_bytes(self, n: int) -> bytes:
        _check_count(n)
        if n == 0:
            return b""
        try:
            return secrets.token_bytes(n)
        except NotImplementedError as e:
            raise _entropy_failure(e) from e

    def next_uniform32(self, n: int) -> List[int]:
        _check_count(n)
        try:
            return [secrets.randbits(32) for _ in range(n)]
        except NotImplementedError as e:
            raise _entropy_failure(e) from e


_DEFAULT = SystemRandomSource()


def default_source() -> SystemRandomSource:
    return _DEFAULT


def resolve_source(source: Optional[SecureRandomSource]) -> SecureRandomSource:
    return default_source() if source is None else source
