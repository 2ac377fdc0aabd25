"""Shared fixtures for the utf8sweep test suite."""

from pathlib import Path

import pytest

from utf8sweep.utils import config as cfg


@pytest.fixture(autouse=True)
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the settings store at a temporary directory.

    Keeps every test away from the real ~/.config/utf8sweep.
    """
    store = tmp_path / "config"
    monkeypatch.setattr(cfg, "CONFIG_DIR", store)
    monkeypatch.setattr(cfg, "CONFIG_FILE", store / "config.toml")
    monkeypatch.setattr(cfg, "IGNORE_FILE", store / "ignore")
    for var in (
        "UTF8SWEEP_CONVERT_ADD_BOM",
        "UTF8SWEEP_CONVERT_WHITELIST_EXTENSIONLESS",
    ):
        monkeypatch.delenv(var, raising=False)
    return store


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Create a small directory tree to sweep.

    Layout::

        tree/
          a.txt          UTF-16 LE with BOM
          b.md           UTF-8 with BOM
          image.png      excluded by default
          README         extensionless
          sub/
            c.TXT        plain ASCII
            deeper/
              d.csv      UTF-16 BE with BOM
    """
    root = tmp_path / "tree"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "a.txt").write_bytes(b"\xff\xfe" + "héllo".encode("utf-16-le"))
    (root / "b.md").write_bytes("# tïtle\n".encode("utf-8-sig"))
    (root / "image.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00")
    (root / "README").write_bytes(b"\xff\xfer\x00")
    (root / "sub" / "c.TXT").write_bytes(b"plain ascii\n")
    (root / "sub" / "deeper" / "d.csv").write_bytes(
        b"\xfe\xff" + "x,y\n".encode("utf-16-be")
    )
    return root
