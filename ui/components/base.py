import re

import streamlit as st

GREEN = "#059669"  # emerald-600
CHIP_BG = "#374151"

# Characters with markdown (or Streamlit LaTeX) meaning
_MD_SPECIAL = re.compile(r"[\\`*_{}\[\]()#+\-.!|<>~$:]")


def inject_base_css():
    """Emit shared styles; call once per script run (Streamlit redraws everything on rerun)."""
    st.markdown(
        f"""
        <style>
        .badge {{
            display:inline-block; padding:2px 8px; border-radius:12px;
            font-size:12px; line-height:16px; font-weight:600;
            background:{CHIP_BG}; color:#F9FAFB; margin-right:4px; margin-bottom:4px;
        }}
        .badge.green {{background:{GREEN};}}
        .route-title {{font-weight:700; font-size:1.05rem; margin:0.6rem 0 0.3rem;}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def completed_badge() -> str:
    return '<span class="badge green">Pickup Completed</span>'


def plain_md(text) -> str:
    """Backslash-escape markdown punctuation so user text renders literally."""
    return _MD_SPECIAL.sub(r"\\\g<0>", str(text or ''))
