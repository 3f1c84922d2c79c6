"""Input-layer public API for key decoding and modal key handling.

Exports are split between low-level terminal decoding (``read_key``) and the
mode transition function used by the runtime loop.
"""

from .modes import NORMAL_BINDINGS, KeyBinding, apply_reflow, commit_jump, commit_search, handle_key
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyBinding",
    "NORMAL_BINDINGS",
    "apply_reflow",
    "commit_jump",
    "commit_search",
    "handle_key",
]
