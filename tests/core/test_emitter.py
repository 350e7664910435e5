"""
Tests for the Artifact Emitter.

Verifies:
1. Rendering format (header, one statement per line, trailing newline only).
2. Empty input renders nothing.
3. File naming and language lookup.
4. Atomic write, skip-when-unchanged and stale removal.
"""

import os
import stat

import pytest

from implicit_imports.core.emitter import (
  AUTOGENERATED_HEADER,
  artifact_file_name,
  get_language,
  remove_artifact,
  render_artifact,
  write_artifact,
)


def test_render_format():
  text = render_artifact(["System", "CustomNamespace"])
  assert text == "// <autogenerated />\nglobal using global::System;\nglobal using global::CustomNamespace;\n"
  assert text.startswith(AUTOGENERATED_HEADER)
  assert not text.endswith("\n\n")


def test_render_empty_is_none():
  assert render_artifact([]) is None


def test_render_is_deterministic():
  names = ["System", "System.Linq"]
  assert render_artifact(names) == render_artifact(list(names))


@pytest.mark.parametrize("alias", ["C#", "c#", "csharp", "CS"])
def test_language_aliases(alias):
  assert get_language(alias).extension == "cs"


def test_unsupported_language_raises():
  with pytest.raises(ValueError, match="Unsupported language"):
    render_artifact(["System"], language="COBOL")


def test_artifact_file_name():
  assert artifact_file_name("ConsoleApp") == "ConsoleApp.ImplicitNamespaceImports.cs"


def test_write_creates_directories(tmp_path):
  target = tmp_path / "obj" / "Debug" / "App.ImplicitNamespaceImports.cs"
  assert write_artifact(target, "content\n") is True
  assert target.read_bytes() == b"content\n"
  # No temporary files left behind
  assert os.listdir(target.parent) == [target.name]


def test_write_skips_identical_content(tmp_path):
  target = tmp_path / "App.ImplicitNamespaceImports.cs"
  write_artifact(target, "same\n")
  before = target.stat().st_mtime_ns

  assert write_artifact(target, "same\n") is False
  assert target.stat().st_mtime_ns == before


def test_write_replaces_changed_content(tmp_path):
  target = tmp_path / "App.ImplicitNamespaceImports.cs"
  write_artifact(target, "old\n")
  assert write_artifact(target, "new\n") is True
  assert target.read_text(encoding="utf-8") == "new\n"


def test_failed_write_leaves_no_partial_file(tmp_path, monkeypatch):
  target = tmp_path / "App.ImplicitNamespaceImports.cs"

  def boom(src, dst):
    raise OSError("disk full")

  monkeypatch.setattr("implicit_imports.core.emitter.os.replace", boom)
  with pytest.raises(OSError, match="disk full"):
    write_artifact(target, "content\n")

  assert not target.exists()
  assert list(tmp_path.iterdir()) == []


def test_remove_artifact(tmp_path):
  target = tmp_path / "App.ImplicitNamespaceImports.cs"
  assert remove_artifact(target) is False
  target.write_text("stale\n", encoding="utf-8")
  assert remove_artifact(target) is True
  assert not target.exists()


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_new_artifact_gets_regular_file_mode(tmp_path):
  plain = tmp_path / "plain.txt"
  plain.write_text("x\n", encoding="utf-8")
  target = tmp_path / "App.ImplicitNamespaceImports.cs"

  write_artifact(target, "x\n")

  assert stat.S_IMODE(target.stat().st_mode) == stat.S_IMODE(plain.stat().st_mode)


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_rewrite_keeps_existing_mode(tmp_path):
  target = tmp_path / "App.ImplicitNamespaceImports.cs"
  target.write_text("old\n", encoding="utf-8")
  os.chmod(target, 0o640)

  assert write_artifact(target, "new\n") is True
  assert stat.S_IMODE(target.stat().st_mode) == 0o640
