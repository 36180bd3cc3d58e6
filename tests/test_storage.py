"""Tests for loading and saving splice targets."""

import pytest

from splice_engine.splice.engine import SpliceEngine
from splice_engine.splice.errors import (
    MissingSourceAndCannotCreate,
    SaveTargetMissing,
    UndecodableSource,
)
from splice_engine.storage.loader import load_buffer, read_text, save_buffer


class TestLoad:
    def test_creates_missing_file_from_default(self, tmp_path, class_template):
        path = tmp_path / "test.ts"
        content = load_buffer(path, class_template)
        assert content == class_template
        assert path.read_bytes() == class_template.encode("utf-8")

    def test_reads_existing_file(self, tmp_path, constructor_source, class_template):
        path = tmp_path / "test.ts"
        path.write_text(constructor_source)
        content = load_buffer(path, class_template)
        assert "signer" in content
        assert path.read_text() == constructor_source

    def test_empty_existing_file_is_not_replaced(self, tmp_path):
        path = tmp_path / "empty.ts"
        path.write_text("")
        assert load_buffer(path, "default") == ""

    def test_preserves_crlf(self, tmp_path):
        path = tmp_path / "crlf.ts"
        path.write_bytes(b"// A\r\nline\r\n")
        assert load_buffer(path, "") == "// A\r\nline\r\n"

    def test_cannot_create(self, tmp_path):
        path = tmp_path / "missing-dir" / "test.ts"
        with pytest.raises(MissingSourceAndCannotCreate) as exc_info:
            load_buffer(path, "x")
        assert str(path) in str(exc_info.value)

    def test_directory_is_not_a_source(self, tmp_path):
        with pytest.raises(MissingSourceAndCannotCreate):
            load_buffer(tmp_path, "x")

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "latin1.ts"
        path.write_bytes(b"// A\n\xff\xfe\n")
        with pytest.raises(MissingSourceAndCannotCreate) as exc_info:
            load_buffer(path, "default")
        assert str(path) in str(exc_info.value)
        assert path.read_bytes() == b"// A\n\xff\xfe\n"


class TestReadText:
    def test_reads_verbatim(self, tmp_path):
        path = tmp_path / "body.ts"
        path.write_bytes(b"a\r\nb")
        assert read_text(path) == "a\r\nb"

    def test_undecodable(self, tmp_path):
        path = tmp_path / "body.ts"
        path.write_bytes(b"\xff")
        with pytest.raises(UndecodableSource):
            read_text(path)

    def test_undecodable_is_value_error(self, tmp_path):
        path = tmp_path / "body.ts"
        path.write_bytes(b"\xff")
        with pytest.raises(ValueError):
            read_text(path)


class TestSave:
    def test_save_requires_existing_file(self, tmp_path):
        path = tmp_path / "nope.ts"
        with pytest.raises(SaveTargetMissing):
            save_buffer(path, "content")
        assert not path.exists()

    def test_save_target_missing_is_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            save_buffer(tmp_path / "nope.ts", "content")

    def test_save_truncates(self, tmp_path):
        path = tmp_path / "test.ts"
        path.write_text("a much longer original body\n")
        save_buffer(path, "short")
        assert path.read_text() == "short"

    def test_save_preserves_crlf(self, tmp_path):
        path = tmp_path / "crlf.ts"
        path.write_bytes(b"")
        save_buffer(path, "a\r\nb\n")
        assert path.read_bytes() == b"a\r\nb\n"

    def test_round_trip(self, tmp_path, class_template):
        path = tmp_path / "test.ts"
        engine = SpliceEngine(load_buffer(path, class_template), target=str(path))
        engine.replace_between("// SimpleStorageConstructor", "\nbody\n", "// CONSTRUCTOR")
        assert engine.content != class_template
        save_buffer(path, engine.content)
        assert load_buffer(path, class_template) == engine.content

    def test_splice_then_save(self, tmp_path, constructor_source):
        path = tmp_path / "test.ts"
        path.write_text(constructor_source)
        engine = SpliceEngine(load_buffer(path, ""), target=str(path))
        engine.replace_between("// SimpleStorageConstructor", "\n    SOME\n    CONTENT\n")
        save_buffer(path, engine.content)
        assert "\n    SOME\n    CONTENT\n" in path.read_text()
        assert "SOME SECRET" not in path.read_text()
