"""
Orchestration of a single implicit-import generation run.

Stages run strictly in order::

    Gate ──SKIP──────────────────────────────────────────> no artifact
     └─> Resolve defaults -> Merge directives -> Deduplicate
                                                  ├─ empty ──> no artifact
                                                  └─ names ──> emit artifact

Nothing is cached between runs; every call recomputes from the configuration.
The only side effect is the final write (or removal) of the artifact file.
"""

import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from implicit_imports.config import RuntimeConfig
from implicit_imports.core.dedup import deduplicate
from implicit_imports.core.emitter import artifact_file_name, remove_artifact, render_artifact, write_artifact
from implicit_imports.core.merger import merge_imports
from implicit_imports.enums import GateDecision
from implicit_imports.frameworks.defaults import resolve_default_imports

logger = logging.getLogger(__name__)


class GenerationResult(BaseModel):
  """
  Outcome of one generation run.
  """

  decision: GateDecision = Field(description="Feature gate outcome.")
  namespaces: List[str] = Field(default_factory=list, description="Final resolved namespaces, in order.")
  content: Optional[str] = Field(None, description="Rendered artifact text, None if no artifact.")
  artifact_path: Optional[Path] = Field(None, description="Where the artifact lives (or would live).")
  written: bool = Field(False, description="True if the file was (re)written during this run.")
  removed_stale: bool = Field(False, description="True if a leftover artifact was deleted.")

  @property
  def has_artifact(self) -> bool:
    """
    Whether this run produces a generated file.

    Returns:
        bool: True if content was rendered.
    """
    return self.content is not None


class ImplicitImportsGenerator:
  """
  Resolves and emits the implicit imports for one build target.
  """

  def __init__(self, config: RuntimeConfig):
    self.config = config
    self.gate = config.gate

  def resolve(self) -> List[str]:
    """
    Computes the final ordered, de-duplicated namespace list.

    Returns:
        List[str]: Resolved namespaces; empty when generation is disabled.
    """
    decision = self.gate.decision
    if decision is GateDecision.SKIP:
      return []

    defaults = resolve_default_imports(self.config.target_framework, self.config.sdk)
    gated = self.gate.gate_defaults(defaults)
    merged = merge_imports(gated, self.config.imports)
    final = deduplicate(merged)

    logger.debug(
      f"{self.config.project_name}: {len(gated)} defaults, {len(self.config.imports)} directives -> {len(final)} imports"
    )
    return final

  def render(self) -> Optional[str]:
    """
    Renders the artifact for the current configuration.

    Returns:
        Optional[str]: Artifact text, or None if no artifact should exist.
    """
    return render_artifact(self.resolve(), self.config.language)

  def artifact_path(self, output_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Location of the generated file.

    Args:
        output_dir (Optional[Path]): Overrides the configured intermediate directory.

    Returns:
        Optional[Path]: The file path, or None if no directory is known.
    """
    directory = output_dir or self.config.intermediate_dir
    if directory is None:
      return None
    return Path(directory) / artifact_file_name(self.config.project_name, self.config.language)

  def run(self, output_dir: Optional[Path] = None) -> GenerationResult:
    """
    Executes the full pipeline and synchronises the artifact on disk.

    When an output directory is known (argument or ``intermediate_dir``), the
    artifact is written there, or removed if this run produces none. Without
    a directory the run is pure and only reports the result.

    Args:
        output_dir (Optional[Path]): Overrides the configured intermediate directory.

    Returns:
        GenerationResult: Decision, namespaces, content and file status.
    """
    decision = self.gate.decision
    namespaces = self.resolve()
    content = render_artifact(namespaces, self.config.language)
    path = self.artifact_path(output_dir)

    result = GenerationResult(
      decision=decision,
      namespaces=namespaces,
      content=content,
      artifact_path=path,
    )

    if path is None:
      return result

    if content is None:
      result.removed_stale = remove_artifact(path)
    else:
      result.written = write_artifact(path, content)
    return result
