"""moyu: a text reader that sits under a decoy log feed.

``main`` is re-exported for ``python -m moyu`` and the console script; the
reader itself lives in ``moyu.runtime``.
"""

from __future__ import annotations

__version__ = "0.1.0"


def main(argv: list[str] | None = None) -> int:
    """Run the CLI; imported lazily so ``import moyu`` stays terminal-free."""
    from .cli import main as _main

    return _main(argv)


__all__ = ["__version__", "main"]
