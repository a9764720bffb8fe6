"""
Tests for writing the component and index files.
"""

import pytest

from config import AlreadyExistsError, ValidationError
from writer import write_component


class TestWriteComponent:

    def test_creates_directory_and_both_files(self, tmp_path):
        out = tmp_path / "src" / "components"

        component_dir = write_component(out, "UserCard", "source v1\n")

        assert component_dir == out / "UserCard"
        assert (component_dir / "UserCard.jsx").read_text() == "source v1\n"
        assert (component_dir / "index.js").read_text() == (
            "export { default } from './UserCard';\n"
        )

    def test_existing_directory_is_not_a_conflict(self, tmp_path):
        (tmp_path / "UserCard").mkdir()
        write_component(tmp_path, "UserCard", "source")
        assert (tmp_path / "UserCard" / "UserCard.jsx").exists()

    def test_refuses_to_overwrite_without_flag(self, tmp_path):
        write_component(tmp_path, "UserCard", "original")
        (tmp_path / "UserCard" / "index.js").unlink()

        with pytest.raises(AlreadyExistsError):
            write_component(tmp_path, "UserCard", "replacement")

        assert (tmp_path / "UserCard" / "UserCard.jsx").read_text() == "original"
        assert not (tmp_path / "UserCard" / "index.js").exists()

    def test_overwrite_replaces_content(self, tmp_path):
        write_component(tmp_path, "UserCard", "a much longer original body")
        write_component(tmp_path, "UserCard", "short", overwrite=True)
        assert (tmp_path / "UserCard" / "UserCard.jsx").read_text() == "short"

    def test_accepts_string_paths(self, tmp_path):
        component_dir = write_component(str(tmp_path / "out"), "Box", "x")
        assert (component_dir / "Box.jsx").exists()

    @pytest.mark.parametrize("bad_name", ["", "..", "../Escape", "a/b", "a\\b"])
    def test_rejects_names_that_leave_the_component_directory(self, tmp_path, bad_name):
        out = tmp_path / "components"
        out.mkdir()
        (out / "index.js").write_text("export * from './Button';\n")

        with pytest.raises(ValidationError):
            write_component(out, bad_name, "source")

        assert (out / "index.js").read_text() == "export * from './Button';\n"
        assert sorted(p.name for p in tmp_path.rglob("*")) == ["components", "index.js"]
