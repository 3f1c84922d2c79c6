from __future__ import annotations

import json
import os
import random
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from moyu.config import ReaderSettings
from moyu.progress import ReadingProgress
from moyu.runtime import build_initial_state, run_reader
from moyu.ui_theme import PLAIN_THEME


class BuildInitialStateTests(unittest.TestCase):
    def test_fresh_document_starts_at_top_with_default_height(self) -> None:
        state = build_initial_state(["one", "two"], 80, None, 5)
        self.assertEqual(state.fragments, ("one", "two"))
        self.assertEqual(state.current, 0)
        self.assertEqual(state.view_height, 5)

    def test_saved_position_and_height_are_restored(self) -> None:
        raw = [f"line {idx}" for idx in range(6)]
        state = build_initial_state(raw, 80, ReadingProgress(last_line=4, view_height=7), 3)
        self.assertEqual(state.current, 4)
        self.assertEqual(state.view_height, 7)

    def test_saved_index_past_end_restarts_at_top(self) -> None:
        state = build_initial_state(["a", "b"], 80, ReadingProgress(last_line=2, view_height=0), 3)
        self.assertEqual(state.current, 0)
        self.assertEqual(state.view_height, 3)

    def test_saved_height_is_clamped(self) -> None:
        state = build_initial_state(["a"], 80, ReadingProgress(last_line=0, view_height=40), 3)
        self.assertEqual(state.view_height, 12)

    def test_default_height_is_clamped(self) -> None:
        state = build_initial_state(["a"], 80, None, 0)
        self.assertEqual(state.view_height, 1)


class RunReaderTests(unittest.TestCase):
    def test_session_restores_and_saves_progress(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            book = root / "book.txt"
            book.write_text("\n".join(f"line {idx}" for idx in range(10)) + "\n", encoding="utf-8")
            progress_path = root / "state" / "progress.json"
            identity = str(book.resolve())
            progress_path.parent.mkdir()
            progress_path.write_text(
                json.dumps({identity: {"last_line": 3, "view_height": 5}}),
                encoding="utf-8",
            )
            seen: dict[str, int] = {}

            def fake_loop(state, _terminal, _stdin_fd, _columns, callbacks) -> None:
                seen["start"] = state.current
                seen["height"] = state.view_height
                state.current = 7
                state.view_height = 2
                callbacks.on_moved()
                seen["feed_offset"] = state.feed_offset

            with mock.patch("moyu.progress.PROGRESS_PATH", progress_path), mock.patch(
                "moyu.runtime.app.TerminalController"
            ), mock.patch("moyu.runtime.app.run_main_loop", side_effect=fake_loop), mock.patch(
                "moyu.runtime.app.shutil.get_terminal_size",
                return_value=os.terminal_size((80, 24)),
            ), mock.patch("sys.stdin") as stdin, mock.patch("sys.stdout") as stdout:
                stdin.fileno.return_value = 0
                stdout.fileno.return_value = 1
                code = run_reader(
                    book,
                    None,
                    ReaderSettings(feed_advance_chance=1.0),
                    PLAIN_THEME,
                    rng=random.Random(0),
                )

            saved = json.loads(progress_path.read_text(encoding="utf-8"))

        self.assertEqual(code, 0)
        self.assertEqual(seen, {"start": 3, "height": 5, "feed_offset": 1})
        self.assertEqual(saved, {identity: {"last_line": 7, "view_height": 2}})

    def test_missing_content_opens_sentinel_document(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            progress_path = root / "progress.json"
            seen: dict[str, tuple[str, ...]] = {}

            def fake_loop(state, *_args) -> None:
                seen["fragments"] = state.fragments

            with mock.patch("moyu.progress.PROGRESS_PATH", progress_path), mock.patch(
                "moyu.runtime.app.TerminalController"
            ), mock.patch("moyu.runtime.app.run_main_loop", side_effect=fake_loop), mock.patch(
                "moyu.runtime.app.shutil.get_terminal_size",
                return_value=os.terminal_size((80, 24)),
            ), mock.patch("sys.stdin") as stdin, mock.patch("sys.stdout") as stdout:
                stdin.fileno.return_value = 0
                stdout.fileno.return_value = 1
                run_reader(root / "missing.txt", None, ReaderSettings(), PLAIN_THEME)

        self.assertEqual(seen["fragments"], ("ERR: STREAM_NOT_FOUND",))


if __name__ == "__main__":
    unittest.main()
