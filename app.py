# app.py
import streamlit as st

from particlebox.axes import axis_bounds
from particlebox.chart import build_figure, formula_captions
from particlebox.config import (
    DEFAULT_LENGTH, DEFAULT_LEVEL, LEVEL_MAX, LEVEL_MIN, PAGE_TITLE,
)
from particlebox.inputs import LengthInput, clamp_level
from particlebox.logging_config import setup_logging
from particlebox.sampler import sample_box

st.set_page_config(page_title=PAGE_TITLE, layout="centered")


@st.cache_resource
def _init_logging():
    return setup_logging()


logger = _init_logging().getChild("app")

# ---------------- Session state init ----------------
if "level" not in st.session_state:
    st.session_state["level"] = DEFAULT_LEVEL
if "box_length" not in st.session_state:
    st.session_state["box_length"] = DEFAULT_LENGTH
if "box_length_text" not in st.session_state:
    st.session_state["box_length_text"] = LengthInput(st.session_state["box_length"]).text
if "normalized" not in st.session_state:
    st.session_state["normalized"] = False

st.session_state["level"] = clamp_level(st.session_state["level"])


def _commit_length():
    """Text field committed (Enter / focus loss): adopt a valid length or reset."""
    field = LengthInput(st.session_state["box_length"])
    st.session_state["box_length"] = field.on_commit(st.session_state["box_length_text"])
    st.session_state["box_length_text"] = field.text


# ---------------- Sampling (cached on the (n, L, normalized) triple) ----------------
@st.cache_data(show_spinner=False)
def sample_once(n: int, L: float, normalized: bool):
    """Grid, ψ and |ψ|² for one input state."""
    return sample_box(n, L, normalized)


# ---------------- Header ----------------
st.title("Wave Pattern Visualizer for Quantum Particles")
st.markdown(
    "Interactive visualization of the wave pattern (Ψ) and probability "
    "distribution (|Ψ|²) for a particle trapped in a one-dimensional box."
)

# ---------------- Controls ----------------
c1, c2, c3 = st.columns(3)
with c1:
    n = st.slider(
        "Quantum Number (n)", LEVEL_MIN, LEVEL_MAX, step=1, key="level",
    )
    st.caption(f"n = {n}  ({LEVEL_MIN} to {LEVEL_MAX})")
with c2:
    st.text_input("Box Length (L)", key="box_length_text", on_change=_commit_length)
    st.caption("(e.g., 0.1 to 10)")
with c3:
    normalized = st.checkbox("Normalize", key="normalized")
    st.caption("(Apply √2/L factor)")

L = st.session_state["box_length"]
if L <= 0:
    L = DEFAULT_LENGTH

# ---------------- Figure ----------------
sample = sample_once(int(n), float(L), bool(normalized))
logger.debug("rendering n=%d L=%.4g normalized=%s", n, L, normalized)
fig = build_figure(sample, axis_bounds(L, normalized))
st.plotly_chart(fig, use_container_width=True)

for line in formula_captions(normalized):
    st.caption(line)
