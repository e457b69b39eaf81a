# core/generator_utils.py
from __future__ import annotations
import base64
import enum
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from core.charset_utils import build_pool
from core.random_utils import SecureRandomSource, resolve_source


class GeneratorMode(str, enum.Enum):
    PASSWORD = "password"
    KEY_HEX = "key-hex"
    KEY_BASE64 = "key-base64"


class KeyEncoding(str, enum.Enum):
    HEX = "hex"
    BASE64 = "base64"


@dataclass(frozen=True)
class GenerationOptions:
    """Per-call options. For key modes, `length` is a byte count."""

    length: int = 16
    uppercase: bool = True
    lowercase: bool = True
    numbers: bool = True
    symbols: bool = True
    avoid_ambiguous: bool = False


# =========================
# Validation
# =========================
def _require_int(value, name: str, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


# =========================
# Password
# =========================
def generate_password(
    options: GenerationOptions,
    source: Optional[SecureRandomSource] = None,
) -> str:
    """
    Draw `options.length` characters from the pool implied by `options`.

    Returns "" when the pool is empty; the caller decides how to surface it.
    Each draw is reduced modulo the pool size, which leaves a small bias
    toward low indices when the size does not divide 2**32.
    """
    length = _require_int(options.length, "length", 1)
    pool = build_pool(options)
    if not pool:
        logger.debug("Empty character pool, returning empty password")
        return ""

    draws = resolve_source(source).next_uniform32(length)
    logger.debug("Generated password: length={}, pool_size={}", length, len(pool))
    return "".join(pool[v % len(pool)] for v in draws)


# =========================
# Keys
# =========================
def generate_key(
    length_bytes: int,
    encoding: KeyEncoding | str,
    source: Optional[SecureRandomSource] = None,
) -> str:
    """Random key of `length_bytes` bytes, as lowercase hex or padded Base64."""
    try:
        encoding = KeyEncoding(encoding)
    except ValueError:
        raise ValueError(f"Unknown key encoding: {encoding!r}") from None
    n = _require_int(length_bytes, "length_bytes", 0)

    raw = resolve_source(source).next_bytes(n)
    logger.debug("Generated key: bytes={}, encoding={}", n, encoding.value)
    if encoding is KeyEncoding.HEX:
        return raw.hex()
    return base64.b64encode(raw).decode("ascii")


# =========================
# Dispatch
# =========================
_KEY_MODES = {
    GeneratorMode.KEY_HEX: KeyEncoding.HEX,
    GeneratorMode.KEY_BASE64: KeyEncoding.BASE64,
}


def generate(
    mode: GeneratorMode | str,
    options: GenerationOptions,
    source: Optional[SecureRandomSource] = None,
) -> str:
    try:
        mode = GeneratorMode(mode)
    except ValueError:
        raise ValueError(f"Unknown generator mode: {mode!r}") from None

    if mode is GeneratorMode.PASSWORD:
        return generate_password(options, source)
    _require_int(options.length, "length", 1)
    return generate_key(options.length, _KEY_MODES[mode], source)
