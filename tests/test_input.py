"""Regression tests for raw-key decoding.

Covers ESC timing, arrow sequences, UTF-8 input, and SGR mouse tokens.
These tests protect interactive input handling in raw terminal mode.
"""

import os
import time
import unittest

from moyu import input as input_mod


class ReadKeyRegressionTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _read_all(self, payload: bytes, count: int) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            return [input_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1b")
            started = time.monotonic()
            key = input_mod.read_key(read_fd, timeout_ms=20)
            elapsed = time.monotonic() - started
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key, "ESC")
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequences_are_recognized(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[A\x1b[B\x1bOA", 3), ["UP", "DOWN", "UP"])

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(self._read_all(b"\x1bj", 2), ["ESC", "j"])

    def test_enter_backspace_and_space_tokens(self) -> None:
        self.assertEqual(
            self._read_all(b"\r\n\x7f\x08 ", 5),
            ["ENTER_CR", "ENTER_LF", "BACKSPACE", "BACKSPACE", " "],
        )

    def test_multibyte_utf8_character_is_one_token(self) -> None:
        self.assertEqual(self._read_all("爽é".encode("utf-8"), 2), ["爽", "é"])

    def test_sgr_mouse_wheel_and_click(self) -> None:
        keys = self._read_all(b"\x1b[<65;10;5M\x1b[<64;3;4M\x1b[<0;7;8M\x1b[<0;7;8m", 4)
        self.assertEqual(
            keys,
            [
                "MOUSE_WHEEL_DOWN:10:5",
                "MOUSE_WHEEL_UP:3:4",
                "MOUSE_LEFT_DOWN:7:8",
                "MOUSE_LEFT_UP:7:8",
            ],
        )

    def test_unsupported_csi_sequence_is_swallowed_whole(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[6~j", 2), ["UNKNOWN", "j"])

    def test_timeout_without_input_returns_empty_token(self) -> None:
        self.assertEqual(self._read_all(b"", 1), [""])


if __name__ == "__main__":
    unittest.main()
