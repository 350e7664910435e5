"""
Artifact Emitter.

Renders the resolved namespaces into the generated source file and persists
it. Rendering is a pure function of its inputs so identical inputs always
give byte-identical text, which lets the build skip rewriting an unchanged
file.

File contract::

    // <autogenerated />
    global using global::System;
    global using global::System.Linq;

An empty namespace list produces no artifact at all.
"""

import os
import stat
import tempfile
from pathlib import Path
from typing import Dict, Optional, Sequence

from pydantic import BaseModel, ConfigDict
from rich.markup import escape

from implicit_imports.utils.console import log_info, log_success

AUTOGENERATED_HEADER = "// <autogenerated />"
ARTIFACT_INFIX = "ImplicitNamespaceImports"


class LanguageSyntax(BaseModel):
  """
  How a source language spells a project-wide namespace import.
  """

  model_config = ConfigDict(frozen=True)

  name: str
  extension: str
  header: str
  statement: str  # format string taking the namespace

  def render_line(self, namespace: str) -> str:
    """
    Formats the import statement for one namespace.

    Args:
        namespace (str): Namespace to import (e.g. 'System.Linq').

    Returns:
        str: A single statement line without a newline.
    """
    return self.statement.format(namespace=namespace)


CSHARP = LanguageSyntax(
  name="C#",
  extension="cs",
  header=AUTOGENERATED_HEADER,
  statement="global using global::{namespace};",
)

_LANGUAGES: Dict[str, LanguageSyntax] = {CSHARP.name: CSHARP}

_LANGUAGE_ALIASES: Dict[str, str] = {
  "c#": CSHARP.name,
  "csharp": CSHARP.name,
  "cs": CSHARP.name,
}


def get_language(name: str) -> LanguageSyntax:
  """
  Looks up the syntax table entry for a language name or alias.

  Args:
      name (str): Language name, e.g. 'C#' or 'csharp' (case-insensitive).

  Returns:
      LanguageSyntax: The syntax description.

  Raises:
      ValueError: If the language cannot host generated global imports.
  """
  canonical = _LANGUAGE_ALIASES.get(name.strip().lower())
  if canonical is None:
    raise ValueError(f"Unsupported language: '{name}'. Supported languages: {sorted(_LANGUAGES)}")
  return _LANGUAGES[canonical]


def artifact_file_name(project_name: str, language: str = CSHARP.name) -> str:
  """
  Builds the generated file name, ``<Project>.ImplicitNamespaceImports.<ext>``.

  Args:
      project_name (str): Name of the project being built.
      language (str): Source language of the project.

  Returns:
      str: The file name (no directory component).
  """
  syntax = get_language(language)
  return f"{project_name}.{ARTIFACT_INFIX}.{syntax.extension}"


def render_artifact(namespaces: Sequence[str], language: str = CSHARP.name) -> Optional[str]:
  """
  Renders the artifact text.

  Args:
      namespaces (Sequence[str]): Final, de-duplicated namespaces in order.
      language (str): Source language to render for.

  Returns:
      Optional[str]: The file content, or None when there is nothing to import.
  """
  if not namespaces:
    return None
  syntax = get_language(language)
  lines = [syntax.header] + [syntax.render_line(ns) for ns in namespaces]
  return "\n".join(lines) + "\n"


def _target_mode(path: Path) -> int:
  """
  Permission bits the artifact should end up with.

  An existing file keeps its mode; a new one gets the default mode for
  regular files under the current umask.

  Args:
      path (Path): Destination file.

  Returns:
      int: Permission bits for ``os.chmod``.
  """
  if path.is_file():
    return stat.S_IMODE(path.stat().st_mode)
  umask = os.umask(0)
  os.umask(umask)
  return 0o666 & ~umask


def write_artifact(path: Path, content: str) -> bool:
  """
  Writes the artifact atomically, skipping unchanged content.

  Content goes to a temporary file in the destination directory which is then
  renamed over ``path``; readers never observe a partial file.

  Args:
      path (Path): Destination file.
      content (str): Text from :func:`render_artifact`.

  Returns:
      bool: True if the file was written, False if it already matched.
  """
  data = content.encode("utf-8")
  if path.is_file() and path.read_bytes() == data:
    log_info(f"Up to date: [path]{escape(path.name)}[/path]")
    return False

  path.parent.mkdir(parents=True, exist_ok=True)
  mode = _target_mode(path)
  fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
  try:
    with os.fdopen(fd, "wb") as f:
      f.write(data)
    # mkstemp creates 0600; the artifact must be readable like any other build output.
    os.chmod(tmp_name, mode)
    os.replace(tmp_name, path)
  except BaseException:
    if os.path.exists(tmp_name):
      os.unlink(tmp_name)
    raise

  log_success(f"Generated [path]{escape(str(path))}[/path]")
  return True


def remove_artifact(path: Path) -> bool:
  """
  Deletes an artifact left behind by an earlier build.

  Args:
      path (Path): Artifact location.

  Returns:
      bool: True if a file was removed.
  """
  if not path.is_file():
    return False
  path.unlink()
  log_info(f"Removed stale [path]{escape(path.name)}[/path]")
  return True
