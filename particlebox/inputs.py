"""
Validation of raw widget input before it reaches the sampler.
"""
from __future__ import annotations

import logging
import math
from typing import Optional

from particlebox.config import DEFAULT_LENGTH, LEVEL_MAX, LEVEL_MIN

logger = logging.getLogger(__name__)


def clamp_level(value) -> int:
    """Coerce *value* to an integer quantum number in [LEVEL_MIN, LEVEL_MAX]."""
    return max(LEVEL_MIN, min(LEVEL_MAX, int(value)))


def parse_length(raw) -> Optional[float]:
    """Parse a box length from user text.

    Returns None when *raw* is not a finite real number greater than zero.
    """
    if raw is None:
        return None
    try:
        value = float(str(raw).strip())
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


class LengthInput:
    """Box-length field state.

    Keystrokes only ever move the value to another valid length; a commit
    (Enter or focus loss) with unusable text resets it to the default.
    The Streamlit page has no per-keystroke hook, so it only calls
    ``on_commit``.
    """

    def __init__(self, value: float = DEFAULT_LENGTH, default: float = DEFAULT_LENGTH):
        self.default = default
        self.value = value if parse_length(value) is not None else default

    def on_keystroke(self, raw) -> float:
        parsed = parse_length(raw)
        if parsed is None:
            logger.debug("ignoring intermediate length input %r", raw)
        else:
            self.value = parsed
        return self.value

    def on_commit(self, raw) -> float:
        parsed = parse_length(raw)
        if parsed is None:
            logger.info("invalid box length %r, resetting to %s", raw, self.default)
            self.value = self.default
        else:
            self.value = parsed
        return self.value

    @property
    def text(self) -> str:
        """Canonical text shown back in the field."""
        return f"{self.value:g}"

    def __repr__(self) -> str:
        return f"LengthInput(value={self.value!r})"
