"""
Tests for VaultScanner and the LocalVault adapter.

Scanning must fill the membership index the same way creation events do,
and must never write to the vault.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from foldergraph_core.adapters.local_vault import LocalVault
from foldergraph_core.ports.vault_port import VaultPort, VaultDirEntry
from foldergraph_core.services.membership import MembershipIndex
from foldergraph_core.services.scanner import VaultScanner


@pytest.fixture
def vault_dir(tmp_path):
    """
    tmp/
        root.md
        a/b.md
        a/c.md
        a/sub/d.md
        empty/
        .obsidian/config.md
    """
    (tmp_path / "a" / "sub").mkdir(parents=True)
    (tmp_path / "empty").mkdir()
    (tmp_path / ".obsidian").mkdir()
    (tmp_path / "root.md").write_text("root")
    (tmp_path / "a" / "b.md").write_text("b")
    (tmp_path / "a" / "c.md").write_text("c")
    (tmp_path / "a" / "sub" / "d.md").write_text("d")
    (tmp_path / ".obsidian" / "config.md").write_text("hidden")
    return tmp_path


class TestLocalVault:
    """Test the read-only vault adapter."""

    def test_scandir_root(self, vault_dir):
        vault = LocalVault(vault_dir)
        entries = list(vault.scandir("/"))

        assert [(e.name, e.path, e.is_dir) for e in entries] == [
            ("a", "a", True),
            ("empty", "empty", True),
            ("root.md", "root.md", False),
        ]

    def test_scandir_nested_paths_use_slashes(self, vault_dir):
        vault = LocalVault(vault_dir)
        paths = [e.path for e in vault.scandir("a")]
        assert paths == ["a/b.md", "a/c.md", "a/sub"]

    def test_path_outside_root_refused(self, vault_dir):
        vault = LocalVault(vault_dir / "a")
        with pytest.raises(PermissionError):
            list(vault.scandir("../empty"))
        assert vault.exists("../root.md") is False

    def test_not_a_directory(self, vault_dir):
        with pytest.raises(NotADirectoryError):
            LocalVault(vault_dir / "root.md")
        with pytest.raises(NotADirectoryError):
            list(LocalVault(vault_dir).scandir("root.md"))

    def test_exists(self, vault_dir):
        vault = LocalVault(vault_dir)
        assert vault.exists("a/b.md")
        assert not vault.exists("a/nope.md")

    def test_has_no_write_methods(self):
        for name in ("write", "delete", "remove", "rename", "move", "mkdir"):
            assert not hasattr(LocalVault, name)


class TestVaultScanner:
    """Test replaying a vault into the membership index."""

    def test_scan_fills_index(self, vault_dir):
        index = MembershipIndex()
        result = VaultScanner(LocalVault(vault_dir), index).scan()

        assert index.lookup("a/b.md") == "a"
        assert index.lookup("a/c.md") == "a"
        assert index.lookup("a/sub/d.md") == "a/sub"
        assert index.lookup("root.md") is None
        assert index.lookup(".obsidian/config.md") is None

        assert (result.folders, result.files, result.empty_folders, result.errors) == (4, 4, 1, 0)
        assert [f.path for f in index.empty_folders] == ["empty"]

    def test_folder_reported_before_its_files(self, vault_dir):
        seen = []
        VaultScanner(LocalVault(vault_dir), MembershipIndex()).scan(
            on_entry=lambda e: seen.append((type(e).__name__, e.path)))

        assert seen.index(("FolderEntry", "a")) < seen.index(("FileEntry", "a/b.md"))
        assert seen[0] == ("FolderEntry", "/")
        assert len(seen) == 8

    def test_scan_does_not_modify_vault(self, vault_dir):
        before = sorted(p.relative_to(vault_dir) for p in vault_dir.rglob("*"))
        VaultScanner(LocalVault(vault_dir), MembershipIndex()).scan()
        after = sorted(p.relative_to(vault_dir) for p in vault_dir.rglob("*"))
        assert before == after

    def test_unreadable_folder_counted_and_skipped(self):
        class BrokenVault(VaultPort):
            def scandir(self, path):
                if path == "/":
                    return iter([VaultDirEntry("ok", "ok", True), VaultDirEntry("bad", "bad", True)])
                if path == "ok":
                    return iter([VaultDirEntry("x.md", "ok/x.md", False)])
                raise PermissionError(f"denied: {path}")

            def exists(self, path):
                return True

        index = MembershipIndex()
        result = VaultScanner(BrokenVault(), index).scan()

        assert result.errors == 1
        assert index.lookup("ok/x.md") == "ok"
