"""
Target Framework Resolution.

Parses target identities and maps them to the framework-provided default
namespaces.
"""

from implicit_imports.frameworks.defaults import (
  BASE_SDK,
  DEFAULT_IMPORT_TABLE,
  DefaultImportEntry,
  resolve_default_imports,
)
from implicit_imports.frameworks.moniker import TargetFramework, parse_target_framework

__all__ = [
  "BASE_SDK",
  "DEFAULT_IMPORT_TABLE",
  "DefaultImportEntry",
  "TargetFramework",
  "parse_target_framework",
  "resolve_default_imports",
]
