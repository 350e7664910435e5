"""
Enumerations for implicit-imports.

This module defines the small closed vocabularies shared across the resolver,
the feature gate and the emitter.
"""

from enum import Enum


class ImportAction(str, Enum):
  """
  Action carried by a user-declared import directive.

  Values mirror the item verbs used by build configuration (``Include`` and
  ``Remove``). Lookup through :meth:`parse` is case-insensitive.
  """

  INCLUDE = "Include"
  REMOVE = "Remove"

  @classmethod
  def parse(cls, raw: str) -> "ImportAction":
    """
    Resolves a raw action string to a member.

    Args:
        raw (str): Action text (e.g. 'include', 'Remove').

    Returns:
        ImportAction: The matching member.

    Raises:
        ValueError: If the text names no known action.
    """
    if isinstance(raw, cls):
      return raw
    text = str(raw).strip().lower()
    for member in cls:
      if member.value.lower() == text:
        return member
    raise ValueError(f"Unknown import action: '{raw}'. Expected one of: {[m.value for m in cls]}")


class FrameworkFamily(str, Enum):
  """
  Target framework identifiers recognised by the moniker parser.
  """

  NETCOREAPP = ".NETCoreApp"
  NETSTANDARD = ".NETStandard"
  NETFRAMEWORK = ".NETFramework"


class GateDecision(str, Enum):
  """
  Outcome of evaluating the generation switches.
  """

  SKIP = "skip"  # nothing is generated
  USER_ONLY = "user_only"  # framework defaults suppressed
  FULL = "full"
