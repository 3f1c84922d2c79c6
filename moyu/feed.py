"""Decorative log feed shown above the reading pane.

The feed is flavor only: a ring of fake daemon log lines that scrolls forward
now and then as the reader moves through the document.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_FEED_LINES: tuple[str, ...] = (
    "[INFO] Init: konjac snack production line online (Build: 0.9.5-SPICY)",
    "[DEBUG] Pressure check: screw extruder at 150 MPa, within tolerance",
    "[INFO] Blending: house chili oil batch (recipe: RED_HOT_09)",
    "[WARN] Sensor alert: slicer blade 03 wear at 85%, schedule replacement",
    "[INFO] Live metrics: konjac flour purity 99.8%, elasticity check pending...",
    "[DEBUG] CO2 injection... simulating tripe texture (sequence: BELLY_SIM)",
    "[ERROR] Fault: unplanned spicy-strip intrusion in mixer 3, auto-rejecting",
    "[INFO] Packaging: vacuum sealing, residual oxygen < 0.01%",
    "[DEBUG] Throughput: 5000 packs/hour, shift contribution 99%",
    "[INFO] Sync: uploading quality telemetry to analytics cluster",
    "[DEBUG] Supervisor interference signal detected nearby, switching to silent mode...",
)

DEFAULT_ADVANCE_CHANCE = 0.4


def load_feed(path: Path | None) -> tuple[str, ...]:
    """Return the non-empty trimmed lines of ``path``, or the built-in feed.

    An unreadable file, or one with no usable lines, keeps the defaults.
    """
    if path is None:
        return DEFAULT_FEED_LINES
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.warning("feed file %s unreadable, keeping built-in feed: %s", path, exc)
        return DEFAULT_FEED_LINES
    lines = tuple(stripped for stripped in (line.strip() for line in text.splitlines()) if stripped)
    return lines or DEFAULT_FEED_LINES


def feed_severity(line: str) -> str:
    """Classify a feed line by its bracketed level tag."""
    if "[WARN]" in line:
        return "warn"
    if "[ERROR]" in line:
        return "error"
    if "[DEBUG]" in line:
        return "debug"
    return "info"


def feed_window(lines: tuple[str, ...], offset: int, rows: int) -> list[str]:
    """Return ``rows`` consecutive feed lines starting at ``offset``, wrapping around."""
    if not lines or rows <= 0:
        return []
    return [lines[(offset + row) % len(lines)] for row in range(rows)]


def should_advance_feed(chance: float, rng: random.Random) -> bool:
    """Roll whether the feed scrolls after the reader moved."""
    return rng.random() < chance
