"""
Runtime Configuration Store.

Collects everything one generation run needs (target identity, switches,
directives, output location) into a validated model. Values come from the
``[tool.implicit_imports]`` table of the nearest ``pyproject.toml`` and can be
overridden by explicit arguments from the calling build host.
"""

import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator
from rich.markup import escape

from implicit_imports.core.directives import ImportDirective, expand_directives
from implicit_imports.core.emitter import get_language
from implicit_imports.core.gate import FeatureGate
from implicit_imports.enums import ImportAction
from implicit_imports.frameworks.defaults import BASE_SDK
from implicit_imports.utils.console import log_warning

TOOL_SECTION = "implicit_imports"


class RuntimeConfig(BaseModel):
  """
  Configuration for generating one target's implicit import file.
  """

  project_name: str = Field(..., min_length=1, description="Project name, used in the artifact file name.")
  target_framework: str = Field(..., description="Target identity (e.g. 'net6.0').")
  sdk: str = Field(BASE_SDK, description="Project SDK flavour (e.g. 'Microsoft.NET.Sdk.Web').")
  language: str = Field("C#", description="Source language of the project.")

  disable_generation: bool = Field(False, description="If True, generate nothing.")
  disable_default_imports: bool = Field(False, description="If True, skip framework defaults.")
  imports: List[ImportDirective] = Field(default_factory=list, description="User Include/Remove directives.")

  intermediate_dir: Optional[Path] = Field(None, description="Directory receiving the generated file.")

  @field_validator("language")
  @classmethod
  def validate_language(cls, v: str) -> str:
    """
    Normalises the language to its canonical name.

    Args:
        v (str): Language name or alias.

    Returns:
        str: Canonical language name (e.g. 'C#').

    Raises:
        ValueError: If the language is not supported.
    """
    return get_language(v).name

  @field_validator("imports", mode="before")
  @classmethod
  def expand_imports(cls, v: Any) -> List[ImportDirective]:
    """
    Expands semicolon-delimited directive values into single directives.

    Args:
        v (Any): Directives as objects or mappings, or None.

    Returns:
        List[ImportDirective]: One directive per namespace.
    """
    if v is None:
      return []
    return expand_directives(v)

  @property
  def gate(self) -> FeatureGate:
    """
    The feature gate built from the two switches.

    Returns:
        FeatureGate: Immutable gate for this configuration.
    """
    return FeatureGate(
      disable_generation=self.disable_generation,
      disable_default_imports=self.disable_default_imports,
    )

  @classmethod
  def load(
    cls,
    project_name: Optional[str] = None,
    target_framework: Optional[str] = None,
    sdk: Optional[str] = None,
    language: Optional[str] = None,
    disable_generation: Optional[bool] = None,
    disable_default_imports: Optional[bool] = None,
    imports: Optional[List[Any]] = None,
    intermediate_dir: Optional[Path] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and applies explicit overrides.

    Explicit arguments that are not None win over TOML values. Directives
    are the exception: explicit ``imports`` are appended after the TOML
    ones, since both describe items of the same project.

    Args:
        project_name (Optional[str]): Override for the project name.
        target_framework (Optional[str]): Override for the target identity.
        sdk (Optional[str]): Override for the SDK flavour.
        language (Optional[str]): Override for the source language.
        disable_generation (Optional[bool]): Override for the full switch.
        disable_default_imports (Optional[bool]): Override for the defaults switch.
        imports (Optional[List]): Extra directives (objects or mappings).
        intermediate_dir (Optional[Path]): Override for the output directory.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.

    Raises:
        ValueError: If the merged settings fail validation.
    """
    start_dir = search_path or Path.cwd()
    toml_config, toml_dir = _load_toml_settings(start_dir)

    final_name = project_name or toml_config.get("project_name")
    if not final_name and toml_dir:
      final_name = toml_dir.name

    final_imports = [_parse_directive_entry(e) for e in toml_config.get("imports", [])]
    final_imports.extend(imports or [])

    final_dir = intermediate_dir
    if final_dir is None and "intermediate_dir" in toml_config:
      final_dir = Path(toml_config["intermediate_dir"])
      if toml_dir and not final_dir.is_absolute():
        final_dir = (toml_dir / final_dir).resolve()

    settings: Dict[str, Any] = {
      "project_name": final_name,
      "target_framework": target_framework or toml_config.get("target_framework"),
      "sdk": sdk or toml_config.get("sdk", BASE_SDK),
      "language": language or toml_config.get("language", "C#"),
      "disable_generation": _pick(disable_generation, toml_config.get("disable_generation"), False),
      "disable_default_imports": _pick(disable_default_imports, toml_config.get("disable_default_imports"), False),
      "imports": final_imports,
      "intermediate_dir": final_dir,
    }

    try:
      return cls.model_validate(settings)
    except ValidationError as e:
      raise ValueError(f"Invalid implicit import configuration: {e}")


def _pick(override: Optional[bool], from_toml: Optional[bool], default: bool) -> bool:
  if override is not None:
    return override
  if from_toml is not None:
    return from_toml
  return default


def _parse_directive_entry(entry: Any) -> Dict[str, Any]:
  """
  Normalises one TOML directive table to ``{value, action}``.

  Accepted shapes: ``{include = "A;B"}``, ``{remove = "A"}`` and
  ``{value = "A", action = "Remove"}``.

  Args:
      entry: Raw TOML value.

  Returns:
      Dict[str, Any]: Mapping accepted by :class:`ImportDirective`.

  Raises:
      ValueError: If the entry has none of the accepted shapes.
  """
  if isinstance(entry, dict):
    if "include" in entry:
      return {"value": entry["include"], "action": ImportAction.INCLUDE}
    if "remove" in entry:
      return {"value": entry["remove"], "action": ImportAction.REMOVE}
    if "value" in entry:
      return {"value": entry["value"], "action": entry.get("action", ImportAction.INCLUDE)}
  raise ValueError(f"Invalid import directive entry: {entry!r}. Expected 'include', 'remove' or 'value' keys.")


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches ``start_path`` and its parents for 'pyproject.toml'.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The tool table and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (tomllib.TOMLDecodeError, OSError) as e:
        log_warning(f"Ignoring unreadable {toml_path}: {escape(str(e))}")
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get(TOOL_SECTION, {}), parent

  return {}, None
