# ui/generator_state.py
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Optional

from core.charset_utils import CATEGORY_ORDER
from core.generator_utils import GenerationOptions, GeneratorMode, generate
from core.random_utils import SecureRandomSource
from core.strength_utils import Strength, score

CATEGORY_FLAGS = tuple(flag for flag, _ in CATEGORY_ORDER)
TOGGLE_FLAGS = CATEGORY_FLAGS + ("avoid_ambiguous",)


@dataclass
class GeneratorState:
    """Interactive state of the generator page (kept in st.session_state)."""

    mode: GeneratorMode = GeneratorMode.PASSWORD
    options: GenerationOptions = field(default_factory=GenerationOptions)
    result: str = ""


def toggle_option(state: GeneratorState, flag: str) -> GenerationOptions:
    """
    Return options with `flag` flipped.

    In password mode the last enabled category cannot be switched off;
    the options come back unchanged.
    """
    if flag not in TOGGLE_FLAGS:
        raise ValueError(f"Unknown option: {flag}")
    opts = state.options
    if state.mode is GeneratorMode.PASSWORD and flag in CATEGORY_FLAGS and getattr(opts, flag):
        active = sum(bool(getattr(opts, f)) for f in CATEGORY_FLAGS)
        if active <= 1:
            return opts
    return replace(opts, **{flag: not getattr(opts, flag)})


def with_length(options: GenerationOptions, length: int) -> GenerationOptions:
    return replace(options, length=int(length))


def regenerate(state: GeneratorState, source: Optional[SecureRandomSource] = None) -> GeneratorState:
    state.result = generate(state.mode, state.options, source)
    return state


def strength_for(state: GeneratorState) -> Strength:
    # Keys are shown as strong regardless of content
    if state.mode is GeneratorMode.PASSWORD:
        return score(state.result)
    return Strength.STRONG
