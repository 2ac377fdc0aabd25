"""Tests for the extension inventory behind ``utf8sweep show``."""

from pathlib import Path

from utf8sweep.core.inventory import list_extensions
from utf8sweep.models.settings import Settings


def _make_files(root: Path, *names: str) -> None:
    root.mkdir(parents=True, exist_ok=True)
    for name in names:
        (root / name).write_bytes(b"")


def test_excluded_extensions_are_hidden(tmp_path: Path) -> None:
    _make_files(tmp_path / "data", "a.txt", "b.TXT", "c.md")
    settings = Settings(excluded_extensions=[".md"])

    found = list_extensions(tmp_path / "data", settings, include_excluded=False)

    assert [ext.lower() for ext in found] == [".txt"]


def test_include_excluded_lists_everything(tmp_path: Path) -> None:
    _make_files(tmp_path / "data", "a.txt", "b.TXT", "c.md")
    settings = Settings(excluded_extensions=[".md"])

    found = list_extensions(tmp_path / "data", settings, include_excluded=True)

    assert sorted(ext.lower() for ext in found) == [".md", ".txt"]


def test_most_recent_casing_wins(tmp_path: Path) -> None:
    # Files are visited in name order: a.txt before b.TXT
    _make_files(tmp_path / "data", "a.txt", "b.TXT")
    found = list_extensions(tmp_path / "data", Settings(excluded_extensions=[]))
    assert found == [".TXT"]


def test_nested_directories_and_extensionless(tmp_path: Path) -> None:
    root = tmp_path / "data"
    _make_files(root, "Makefile")
    _make_files(root / "src", "main.py")
    _make_files(root / "src" / "pkg", "mod.py", "icon.png")

    found = list_extensions(root, Settings())

    # .png is excluded by default; extensionless files report ""
    assert found == ["", ".py"]


def test_exclusion_ignores_case_of_found_extension(tmp_path: Path) -> None:
    _make_files(tmp_path / "data", "photo.JPG", "notes.txt")
    found = list_extensions(tmp_path / "data", Settings())
    assert found == [".txt"]


def test_unreadable_directory_reported(tmp_path: Path, monkeypatch) -> None:
    root = tmp_path / "data"
    _make_files(root, "a.txt")
    _make_files(root / "locked", "b.cfg")
    errors: list[str] = []
    original_iterdir = Path.iterdir

    def fake_iterdir(self: Path):
        if self.name == "locked":
            raise PermissionError(13, "Permission denied", str(self))
        return original_iterdir(self)

    monkeypatch.setattr(Path, "iterdir", fake_iterdir)

    found = list_extensions(root, Settings(), on_error=errors.append)

    assert found == [".txt"]
    assert len(errors) == 1


def test_dotfiles_listed_under_their_own_name(tmp_path: Path) -> None:
    _make_files(tmp_path / "data", ".gitignore", "notes.txt")
    found = list_extensions(tmp_path / "data", Settings())
    assert found == [".gitignore", ".txt"]
