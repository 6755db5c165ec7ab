"""PassForge -- Streamlit web interface."""

import streamlit as st

from passforge import (
    DEFAULT_LENGTH,
    MAX_LENGTH,
    MIN_LENGTH,
    GenerationOptions,
    analyze,
    generate,
    improve,
)

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_SHIELD = _LUCIDE.format(s=32, paths=(
    '<path d="M20 13c0 5-3.5 7.5-7.66 8.95a1 1 0 0 1-.67-.01'
    'C7.5 20.5 4 18 4 13V6a1 1 0 0 1 1-1c2 0 4.5-1.2 6.24-2.72'
    'a1.17 1.17 0 0 1 1.52 0C14.51 3.81 17 5 19 5a1 1 0 0 1 1 1z"/>'
))

ICON_SLIDERS = _LUCIDE.format(s=20, paths=(
    '<line x1="4" x2="4" y1="21" y2="14"/><line x1="4" x2="4" y1="10" y2="3"/>'
    '<line x1="12" x2="12" y1="21" y2="12"/><line x1="12" x2="12" y1="8" y2="3"/>'
    '<line x1="20" x2="20" y1="21" y2="16"/><line x1="20" x2="20" y1="12" y2="3"/>'
    '<line x1="2" x2="6" y1="14" y2="14"/><line x1="10" x2="14" y1="8" y2="8"/>'
    '<line x1="18" x2="22" y1="16" y2="16"/>'
))

# Color tag -> CSS color
COLORS = {
    "neutral": "#9e9e9e",
    "weakest": "#d32f2f",
    "weak": "#f57c00",
    "moderate": "#fbc02d",
    "strong": "#66bb6a",
    "strongest": "#2e7d32",
}

TIPS = [
    "Use at least 12 characters for better security",
    "Mix uppercase, lowercase, numbers, and symbols",
    "Avoid common words and personal information",
    "Use unique passwords for each account",
    "Consider using a password manager",
]

st.set_page_config(
    page_title="Password Generator",
    page_icon="\U0001f6e1️",
    layout="centered",
)


def show_strength(password: str) -> None:
    report = analyze(password)
    st.markdown(
        f"**Strength:** <span style='color:{COLORS[report.color]}'>{report.label}</span>"
        f" &nbsp;·&nbsp; {report.score}/100",
        unsafe_allow_html=True,
    )
    st.progress(report.score / 100)
    for line in report.feedback:
        st.warning(line, icon="⚠️")


# ── Header ────────────────────────────────────────────────────────────────

st.markdown(
    f'<h1 style="display:flex;align-items:center;gap:10px">'
    f'{ICON_SHIELD} Password Generator</h1>',
    unsafe_allow_html=True,
)
st.caption(
    "Check how strong a password is, improve a weak one, or generate a new one. "
    "Everything runs locally - nothing is sent over the network."
)

tab_check, tab_generate = st.tabs(["Check & Improve", "Generate"])

# ── Check tab ──────────────────────────────────────────────────────────────

with tab_check:
    password = st.text_input(
        "Password",
        type="password",
        placeholder="Enter your password to check its strength…",
        autocomplete="off",
    )
    show_strength(password)

    if st.button("Improve password", type="primary"):
        if not password:
            st.error("Please enter a password to improve.")
        else:
            better = improve(password)
            st.success("Your password has been enhanced for better security.")
            st.code(better, language=None)
            show_strength(better)

# ── Generate tab ───────────────────────────────────────────────────────────

with tab_generate:
    st.markdown(
        f'<p style="display:flex;align-items:center;gap:6px">'
        f'{ICON_SLIDERS} <strong>Generation options</strong></p>',
        unsafe_allow_html=True,
    )
    length = st.slider("Length", MIN_LENGTH, MAX_LENGTH, DEFAULT_LENGTH)
    col1, col2 = st.columns(2)
    with col1:
        use_symbols = st.toggle("Include symbols", value=True)
        use_upper = st.toggle("Uppercase letters", value=True)
        use_lower = st.toggle("Lowercase letters", value=True)
    with col2:
        use_numbers = st.toggle("Include numbers", value=True)
        use_letters = st.toggle("Include letters", value=True)
        use_similar = st.toggle("Similar characters", value=True)

    if st.button("Generate secure password", type="primary"):
        options = GenerationOptions(
            include_symbols=use_symbols,
            include_uppercase=use_upper,
            include_lowercase=use_lower,
            include_numbers=use_numbers,
            include_letters=use_letters,
            include_similar_chars=use_similar,
        )
        pwd = generate(length, options)
        st.code(pwd, language=None)
        show_strength(pwd)

st.divider()
st.caption("**Security tips**  \n" + "  \n".join(f"- {tip}" for tip in TIPS))
