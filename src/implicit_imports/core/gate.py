"""
Feature Gate.

Holds the two generation switches and the precedence rule between them:
disabling generation outright wins over disabling only the framework defaults.
"""

from typing import List, Sequence

from pydantic import BaseModel, ConfigDict, Field

from implicit_imports.enums import GateDecision


class FeatureGate(BaseModel):
  """
  Generation switches for a single build target.
  """

  model_config = ConfigDict(frozen=True)

  disable_generation: bool = Field(False, description="If True, no file is generated at all.")
  disable_default_imports: bool = Field(
    False, description="If True, framework defaults are dropped but user directives still apply."
  )

  @property
  def decision(self) -> GateDecision:
    """
    Applies the switch precedence: full disable wins over defaults-only.

    Returns:
        GateDecision: SKIP, USER_ONLY or FULL.
    """
    if self.disable_generation:
      return GateDecision.SKIP
    if self.disable_default_imports:
      return GateDecision.USER_ONLY
    return GateDecision.FULL

  def gate_defaults(self, defaults: Sequence[str]) -> List[str]:
    """
    Filters the framework default list through the gate.

    Args:
        defaults (Sequence[str]): Output of the target resolver.

    Returns:
        List[str]: A copy of ``defaults`` when fully enabled, otherwise empty.
    """
    if self.decision is GateDecision.FULL:
      return list(defaults)
    return []
