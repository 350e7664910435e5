"""
implicit-imports Package.

Resolves the namespaces a build target imports implicitly and renders them
into a generated source file of project-wide ``global using`` directives.

Usage
-----

Resolve Only
^^^^^^^^^^^^

.. code-block:: python

    import implicit_imports as ii
    ii.resolve_imports("net6.0", imports=[{"value": "System.IO", "action": "Remove"}])
    # ['System', 'System.Collections.Generic', 'System.Linq', ...]

Generate the File
^^^^^^^^^^^^^^^^^

.. code-block:: python

    from implicit_imports import ImplicitImportsGenerator, RuntimeConfig

    config = RuntimeConfig(project_name="App", target_framework="net6.0", intermediate_dir=obj_dir)
    result = ImplicitImportsGenerator(config).run()
    if result.has_artifact:
        print(result.artifact_path)
"""

from pathlib import Path
from typing import Any, List, Optional

from implicit_imports.config import RuntimeConfig
from implicit_imports.core.directives import ImportDirective
from implicit_imports.core.pipeline import GenerationResult, ImplicitImportsGenerator
from implicit_imports.enums import GateDecision, ImportAction

__version__ = "0.1.0"


def resolve_imports(
  target_framework: str,
  imports: Optional[List[Any]] = None,
  disable_generation: bool = False,
  disable_default_imports: bool = False,
  sdk: Optional[str] = None,
) -> List[str]:
  """
  Computes the final namespace list for a target without touching disk.

  Args:
      target_framework (str): Target identity (e.g. 'net6.0').
      imports (list, optional): Directives, as ``ImportDirective`` objects or
          ``{"value": ..., "action": ...}`` mappings. Values may be
          semicolon-delimited.
      disable_generation (bool): Turns generation off entirely.
      disable_default_imports (bool): Drops framework defaults only.
      sdk (str, optional): Project SDK flavour.

  Returns:
      List[str]: Ordered, de-duplicated namespaces.
  """
  config = RuntimeConfig(
    project_name="_",
    target_framework=target_framework,
    imports=imports or [],
    disable_generation=disable_generation,
    disable_default_imports=disable_default_imports,
    **({"sdk": sdk} if sdk else {}),
  )
  return ImplicitImportsGenerator(config).resolve()


def generate_imports_file(
  project_name: str,
  target_framework: str,
  output_dir: Path,
  imports: Optional[List[Any]] = None,
  disable_generation: bool = False,
  disable_default_imports: bool = False,
  sdk: Optional[str] = None,
  language: str = "C#",
) -> GenerationResult:
  """
  Resolves the imports and writes (or removes) the generated file.

  Args:
      project_name (str): Project name used in the file name.
      target_framework (str): Target identity.
      output_dir (Path): Intermediate build-output directory.
      imports (list, optional): User directives.
      disable_generation (bool): Turns generation off entirely.
      disable_default_imports (bool): Drops framework defaults only.
      sdk (str, optional): Project SDK flavour.
      language (str): Source language of the project.

  Returns:
      GenerationResult: The outcome, including the artifact path and status.
  """
  config = RuntimeConfig(
    project_name=project_name,
    target_framework=target_framework,
    imports=imports or [],
    disable_generation=disable_generation,
    disable_default_imports=disable_default_imports,
    language=language,
    intermediate_dir=output_dir,
    **({"sdk": sdk} if sdk else {}),
  )
  return ImplicitImportsGenerator(config).run()


__all__ = [
  "GateDecision",
  "GenerationResult",
  "ImplicitImportsGenerator",
  "ImportAction",
  "ImportDirective",
  "RuntimeConfig",
  "__version__",
  "generate_imports_file",
  "resolve_imports",
]
