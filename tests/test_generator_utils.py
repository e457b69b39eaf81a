"""Tests for password and key generation."""

import base64
import itertools
import math
import re

import pytest

from core.charset_utils import AMBIGUOUS, NUMBER, build_pool
from core.generator_utils import (
    GenerationOptions,
    GeneratorMode,
    KeyEncoding,
    generate,
    generate_key,
    generate_password,
)
from core.random_utils import EntropyUnavailableError

FLAG_COMBOS = [c for c in itertools.product([False, True], repeat=4) if any(c)]


def make(flags, length, avoid=False):
    upper, lower, numbers, symbols = flags
    return GenerationOptions(
        length=length,
        uppercase=upper,
        lowercase=lower,
        numbers=numbers,
        symbols=symbols,
        avoid_ambiguous=avoid,
    )


# =========================
# Passwords
# =========================
@pytest.mark.parametrize("flags", FLAG_COMBOS)
@pytest.mark.parametrize("avoid", [False, True])
def test_password_length_and_membership(flags, avoid):
    for length in (1, 4, 17, 128, 256):
        options = make(flags, length, avoid)
        pool = set(build_pool(options))
        pw = generate_password(options)
        assert len(pw) == length
        assert set(pw) <= pool
        if avoid:
            assert not set(pw) & AMBIGUOUS


def test_no_categories_returns_empty_string(scripted_source):
    src = scripted_source()
    options = make((False, False, False, False), 16)
    assert generate_password(options, src) == ""
    # nothing drawn for an empty pool
    assert src.calls == []


def test_avoid_ambiguous_never_emits_ambiguous():
    options = GenerationOptions(length=256, avoid_ambiguous=True)
    for _ in range(20):
        assert not set(generate_password(options)) & AMBIGUOUS


def test_draws_map_modulo_pool_size(scripted_source):
    options = make((False, False, True, False), 5)
    src = scripted_source(uint32=[0, 9, 10, 2**32 - 1, 123])
    # 2**32 - 1 = 4294967295 -> index 5
    assert generate_password(options, src) == "09053"
    assert src.calls == [("uint32", 5)]


def test_draw_order_preserved(scripted_source):
    options = make((True, False, False, False), 3)
    src = scripted_source(uint32=[25, 0, 1])
    assert generate_password(options, src) == "ZAB"


def test_seeded_source_is_reproducible(seeded_source):
    options = GenerationOptions(length=40)
    fresh = type(seeded_source)()
    assert generate_password(options, seeded_source) == generate_password(options, fresh)


@pytest.mark.parametrize("bad", [0, -3, 2.0, "8", None, True])
def test_invalid_password_length_rejected(bad):
    with pytest.raises(ValueError):
        generate_password(GenerationOptions(length=bad))


def test_invalid_length_rejected_even_with_empty_pool():
    with pytest.raises(ValueError):
        generate_password(make((False, False, False, False), 0))


def test_entropy_failure_propagates():
    class Broken:
        def next_uniform32(self, n):
            raise EntropyUnavailableError("gone")

        def next_bytes(self, n):
            raise EntropyUnavailableError("gone")

    with pytest.raises(EntropyUnavailableError):
        generate_password(GenerationOptions(length=8), Broken())
    with pytest.raises(EntropyUnavailableError):
        generate_key(8, KeyEncoding.HEX, Broken())


def test_selection_frequency_is_uniform():
    # Chi-square goodness of fit over the 10 digits (df = 9).
    # 33.72 is the critical value at p = 0.0001.
    options = make((False, False, True, False), 20_000)
    pw = generate_password(options)
    expected = len(pw) / len(NUMBER)
    counts = {ch: 0 for ch in NUMBER}
    for ch in pw:
        counts[ch] += 1
    chi2 = sum((c - expected) ** 2 / expected for c in counts.values())
    assert chi2 < 33.72


# =========================
# Keys
# =========================
HEX_RE = re.compile(r"[0-9a-f]*")


@pytest.mark.parametrize("n", [0, 1, 2, 3, 16, 32, 64, 129])
def test_hex_key_shape(n):
    key = generate_key(n, KeyEncoding.HEX)
    assert len(key) == 2 * n
    assert HEX_RE.fullmatch(key)


@pytest.mark.parametrize("n", [0, 1, 2, 3, 16, 32, 64, 129])
def test_base64_key_decodes_to_n_bytes(n):
    key = generate_key(n, KeyEncoding.BASE64)
    assert len(key) == math.ceil(n / 3) * 4
    assert len(base64.b64decode(key, validate=True)) == n


def test_key_encodings_exact(scripted_source):
    data = bytes([0x00, 0x0F, 0xAB, 0xFF, 0xFB])
    assert generate_key(5, KeyEncoding.HEX, scripted_source(data=data)) == "000fabfffb"
    # standard alphabet uses "+" and "/", with "=" padding
    assert generate_key(5, "base64", scripted_source(data=data)) == "AA+r//s="


def test_zero_bytes_is_empty(scripted_source):
    assert generate_key(0, "hex", scripted_source()) == ""
    assert generate_key(0, "base64", scripted_source()) == ""


@pytest.mark.parametrize("bad", [-1, 1.5, "4", True])
def test_invalid_key_length_rejected(bad):
    with pytest.raises(ValueError):
        generate_key(bad, KeyEncoding.HEX)


def test_unknown_encoding_rejected():
    with pytest.raises(ValueError):
        generate_key(8, "base32")


# =========================
# Dispatch
# =========================
def test_generate_dispatches_by_mode(scripted_source):
    options = make((False, False, True, False), 3)
    assert generate(GeneratorMode.PASSWORD, options, scripted_source(uint32=[1, 2, 3])) == "123"
    assert generate("key-hex", options, scripted_source(data=b"\x01\x02\x03")) == "010203"
    assert generate("key-base64", options, scripted_source(data=b"abc")) == "YWJj"


def test_key_modes_ignore_category_flags():
    options = make((False, False, False, False), 8)
    assert len(generate(GeneratorMode.KEY_HEX, options)) == 16


def test_key_modes_reject_non_positive_length():
    with pytest.raises(ValueError):
        generate(GeneratorMode.KEY_HEX, GenerationOptions(length=0))


def test_unknown_mode_rejected():
    with pytest.raises(ValueError):
        generate("pin", GenerationOptions())
