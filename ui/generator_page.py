# ui/generator_page.py
from __future__ import annotations
import streamlit as st
from loguru import logger

from config import settings
from core.charset_utils import CATEGORY_ORDER
from core.generator_utils import GenerationOptions, GeneratorMode
from core.strength_utils import Strength
from ui.generator_state import (
    GeneratorState,
    regenerate,
    strength_for,
    toggle_option,
    with_length,
)

STATE_KEY = "generator_state"

MODE_LABELS = {
    GeneratorMode.PASSWORD:   "🔒 Password",
    GeneratorMode.KEY_HEX:    "🔑 Key (Hex)",
    GeneratorMode.KEY_BASE64: "🔑 Key (Base64)",
}

CATEGORY_LABELS = {
    "uppercase": "A–Z",
    "lowercase": "a–z",
    "numbers":   "0–9",
    "symbols":   "Symbols",
}

STRENGTH_COLORS = {
    Strength.WEAK:   "#ef4444",
    Strength.MEDIUM: "#eab308",
    Strength.STRONG: "#22c55e",
}


def _state() -> GeneratorState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = GeneratorState(
            options=GenerationOptions(length=settings.default_length)
        )
    return st.session_state[STATE_KEY]


def _sync_widgets(state: GeneratorState) -> None:
    # Widget keys mirror the options; callbacks write back both ways
    opts = state.options
    st.session_state.setdefault("opt_length", opts.length)
    for flag, _ in CATEGORY_ORDER:
        st.session_state.setdefault(f"opt_{flag}", getattr(opts, flag))
    st.session_state.setdefault("opt_avoid_ambiguous", opts.avoid_ambiguous)


def _safe_regenerate(state: GeneratorState) -> None:
    try:
        regenerate(state)
    except Exception as e:
        logger.exception("Generation failed")
        state.result = ""
        st.session_state["generator_error"] = str(e)
    else:
        st.session_state.pop("generator_error", None)


def _on_mode_change() -> None:
    state = _state()
    state.mode = GeneratorMode(st.session_state["opt_mode"])
    _safe_regenerate(state)


def _on_length_change() -> None:
    state = _state()
    state.options = with_length(state.options, st.session_state["opt_length"])
    _safe_regenerate(state)


def _on_toggle(flag: str) -> None:
    state = _state()
    state.options = toggle_option(state, flag)
    # Refused toggles snap the checkbox back
    st.session_state[f"opt_{flag}"] = getattr(state.options, flag)
    _safe_regenerate(state)


def _result_box(result: str) -> None:
    # st.code carries its own copy-to-clipboard button
    st.code(result, language=None)


def render():
    st.subheader("🔐 Password & Key Generator")

    state = _state()
    _sync_widgets(state)
    if not state.result and "generator_error" not in st.session_state:
        _safe_regenerate(state)  # first visit

    st.session_state.setdefault("opt_mode", state.mode.value)
    st.radio(
        "Mode",
        [m.value for m in MODE_LABELS],
        format_func=lambda v: MODE_LABELS[GeneratorMode(v)],
        horizontal=True,
        key="opt_mode",
        on_change=_on_mode_change,
    )

    _result_box(state.result)

    err = st.session_state.get("generator_error")
    if err:
        st.error(f"Generation error: {err}")
    elif state.mode is GeneratorMode.PASSWORD and not state.result:
        st.warning("Select at least one character set.")

    colL, colR = st.columns([3, 2])
    with colL:
        if st.button("🎲 Generate", type="primary", use_container_width=True):
            _safe_regenerate(state)
            st.rerun()
        if state.mode is GeneratorMode.PASSWORD:
            strength = strength_for(state)
            st.markdown(
                f"Strength: <span style='color:{STRENGTH_COLORS[strength]}'>●</span> **{strength.value}**",
                unsafe_allow_html=True,
            )

    with colR:
        unit = "characters" if state.mode is GeneratorMode.PASSWORD else "bytes"
        st.slider(
            f"Length ({unit})",
            settings.min_length,
            settings.max_length,
            step=1,
            key="opt_length",
            on_change=_on_length_change,
        )

    if state.mode is GeneratorMode.PASSWORD:
        st.markdown("**Character sets**")
        cols = st.columns(len(CATEGORY_ORDER))
        for col, (flag, _) in zip(cols, CATEGORY_ORDER):
            with col:
                st.checkbox(
                    CATEGORY_LABELS[flag],
                    key=f"opt_{flag}",
                    on_change=_on_toggle,
                    args=(flag,),
                )
        st.checkbox(
            "Avoid ambiguous characters (0 O I l 1)",
            key="opt_avoid_ambiguous",
            on_change=_on_toggle,
            args=("avoid_ambiguous",),
        )
    else:
        st.caption(f"{state.options.length} random bytes from the OS secure random source.")
