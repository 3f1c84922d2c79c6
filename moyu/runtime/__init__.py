"""Runtime package: session bootstrap, event loop, and terminal control."""

from .app import build_initial_state, run_reader
from .loop import RuntimeLoopCallbacks, run_main_loop
from .terminal import TerminalController

__all__ = [
    "RuntimeLoopCallbacks",
    "TerminalController",
    "build_initial_state",
    "run_main_loop",
    "run_reader",
]
