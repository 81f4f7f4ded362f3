"""Tests for language and text detection."""

from pathlib import Path

import pytest

from codeinventory.language_detection import get_extension, get_language_tag, is_text_file


class TestGetExtension:
    """Tests for get_extension."""

    def test_simple_extension(self) -> None:
        assert get_extension("main.py") == "py"

    def test_last_dot_wins(self) -> None:
        assert get_extension("archive.tar.gz") == "gz"

    def test_no_dot_is_whole_name(self) -> None:
        """A filename without a dot is its own extension."""
        assert get_extension("README") == "README"

    def test_dotfile(self) -> None:
        assert get_extension(".env") == "env"

    def test_trailing_dot(self) -> None:
        assert get_extension("notes.") == ""


class TestGetLanguageTag:
    """Tests for get_language_tag."""

    @pytest.mark.parametrize(
        ("extension", "expected"),
        [
            ("js", "javascript"),
            ("py", "python"),
            ("sh", "bash"),
            ("bash", "bash"),
            ("cc", "cpp"),
            ("cs", "csharp"),
            ("yml", "yaml"),
            ("md", "markdown"),
        ],
    )
    def test_known_extensions(self, extension: str, expected: str) -> None:
        assert get_language_tag(extension) == expected

    def test_unknown_extension_is_text(self) -> None:
        assert get_language_tag("toml") == "text"
        assert get_language_tag("README") == "text"

    def test_lookup_is_case_sensitive(self) -> None:
        assert get_language_tag("PY") == "text"


class TestIsTextFile:
    """Tests for is_text_file."""

    def test_plain_text(self, tmp_path: Path) -> None:
        path = tmp_path / "a.py"
        path.write_text("print('hi')\n")
        assert is_text_file(path)

    def test_utf8_text(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.md"
        path.write_text("héllo wörld ✓\n", encoding="utf-8")
        assert is_text_file(path)

    def test_empty_file_is_text(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.txt"
        path.write_bytes(b"")
        assert is_text_file(path)

    def test_nul_bytes_are_binary(self, tmp_path: Path) -> None:
        path = tmp_path / "b.bin"
        path.write_bytes(b"\x00\x01\x02\x03")
        assert not is_text_file(path)

    def test_invalid_utf8_is_binary(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.dat"
        path.write_bytes(b"\xff\xfe\xfa not utf-8")
        assert not is_text_file(path)

    def test_invalid_utf8_after_first_chunk_is_binary(self, tmp_path: Path) -> None:
        path = tmp_path / "late.txt"
        path.write_bytes(b"a" * 9000 + b"\n\xff\xfe tail\n")
        assert not is_text_file(path)

    def test_nul_after_first_chunk_is_binary(self, tmp_path: Path) -> None:
        path = tmp_path / "late.dat"
        path.write_bytes(b"a" * 20000 + b"\x00")
        assert not is_text_file(path)

    def test_multibyte_across_chunk_boundary(self, tmp_path: Path) -> None:
        path = tmp_path / "wide.md"
        path.write_bytes(b"a" * 8191 + "é✓".encode("utf-8") + b"\n")
        assert is_text_file(path)

    def test_truncated_multibyte_at_end_is_binary(self, tmp_path: Path) -> None:
        path = tmp_path / "cut.txt"
        path.write_bytes("ok ✓".encode("utf-8")[:-1])
        assert not is_text_file(path)

    def test_missing_file_is_not_text(self, tmp_path: Path) -> None:
        assert not is_text_file(tmp_path / "missing.txt")
