"""Content loading: encodings, line splitting, and the missing-file sentinel."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from moyu.content import STREAM_NOT_FOUND, load_content_lines, read_text, sanitize_terminal_text, split_raw_lines


class SplitRawLinesTests(unittest.TestCase):
    def test_trailing_newline_does_not_add_empty_line(self) -> None:
        self.assertEqual(split_raw_lines("a\nb\n"), ["a", "b"])
        self.assertEqual(split_raw_lines("a\nb"), ["a", "b"])

    def test_blank_lines_and_crlf_are_handled(self) -> None:
        self.assertEqual(split_raw_lines("a\r\n\r\nb\r\n"), ["a", "", "b"])

    def test_empty_text_has_no_lines(self) -> None:
        self.assertEqual(split_raw_lines(""), [])


class LoadContentLinesTests(unittest.TestCase):
    def test_missing_file_degrades_to_sentinel(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(load_content_lines(Path(tmp) / "missing.txt"), [STREAM_NOT_FOUND])

    def test_bom_and_latin1_files_decode(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            bom = Path(tmp) / "bom.txt"
            bom.write_bytes("\ufeffhello\n".encode("utf-8"))
            self.assertEqual(load_content_lines(bom), ["hello"])

            latin = Path(tmp) / "latin.txt"
            latin.write_bytes("caf\xe9\n".encode("latin-1"))
            self.assertEqual(load_content_lines(latin), ["caf\xe9"])

    def test_invalid_utf8_decodes_byte_for_byte_as_latin1(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "mixed.bin"
            path.write_bytes(b"ok \xff\xfe \xc3")
            self.assertEqual(read_text(path), "ok \xff\xfe \xc3")

    def test_control_bytes_are_neutralized(self) -> None:
        self.assertEqual(sanitize_terminal_text("a\x1b[2Jb\tc"), "a\\x1b[2Jb c")


if __name__ == "__main__":
    unittest.main()
