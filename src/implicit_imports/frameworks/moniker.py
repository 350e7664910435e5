"""
Target Framework Moniker Parsing.

Turns the opaque target identity supplied by the build (``net6.0``,
``netcoreapp3.1``, ``net48``, ``.NETCoreApp,Version=v6.0`` ...) into a
structured :class:`TargetFramework`. Identities that match none of the known
shapes parse to ``None``; callers treat that as "no defaults", never as a
failure.
"""

import re
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from implicit_imports.enums import FrameworkFamily

# net6.0, netcoreapp3.1, netstandard2.0, net4.8 (optionally with a -platform suffix)
_DOTTED_RE = re.compile(r"^(net|netcoreapp|netstandard)(\d+(?:\.\d+)+)(?:-(.+))?$")

# net48, net472, net60 (compact spelling without dots)
_COMPACT_RE = re.compile(r"^net(\d{2,3})(?:-(.+))?$")

# .NETCoreApp,Version=v6.0
_LONG_FORM_RE = re.compile(r"^(\.net[a-z]+)\s*,\s*version\s*=\s*v?(\d+(?:\.\d+)*)$")

_FAMILY_BY_PREFIX = {
  "netcoreapp": FrameworkFamily.NETCOREAPP,
  "netstandard": FrameworkFamily.NETSTANDARD,
}

# First major version where a plain 'netX.Y' moniker names .NETCoreApp.
_UNIFIED_NET_MAJOR = 5


class TargetFramework(BaseModel):
  """
  Structured view of a target identity.
  """

  model_config = ConfigDict(frozen=True)

  family: FrameworkFamily = Field(description="Framework identifier, e.g. '.NETCoreApp'.")
  version: Tuple[int, ...] = Field(description="Numeric version parts, e.g. (6, 0).")
  platform: Optional[str] = Field(None, description="Platform suffix, e.g. 'windows10.0.19041'.")

  def at_least(self, minimum: Tuple[int, ...]) -> bool:
    """
    Compares versions part-wise, padding the shorter one with zeros.

    Args:
        minimum (Tuple[int, ...]): Lowest accepted version.

    Returns:
        bool: True if this framework's version is >= ``minimum``.
    """
    width = max(len(self.version), len(minimum))
    ours = self.version + (0,) * (width - len(self.version))
    theirs = minimum + (0,) * (width - len(minimum))
    return ours >= theirs


def _parse_version(text: str) -> Tuple[int, ...]:
  return tuple(int(part) for part in text.split("."))


def parse_target_framework(identity: Optional[str]) -> Optional[TargetFramework]:
  """
  Parses a target identity string.

  Matching is case-insensitive and ignores surrounding whitespace.

  Args:
      identity (Optional[str]): The raw identity from build configuration.

  Returns:
      Optional[TargetFramework]: The parsed framework, or None if the
      identity is empty or has an unrecognised shape.
  """
  if not identity:
    return None

  text = identity.strip().lower()

  match = _LONG_FORM_RE.match(text)
  if match:
    family_text, version_text = match.groups()
    for family in FrameworkFamily:
      if family.value.lower() == family_text:
        return TargetFramework(family=family, version=_parse_version(version_text))
    return None

  match = _DOTTED_RE.match(text)
  if match:
    prefix, version_text, platform = match.groups()
    version = _parse_version(version_text)
    if prefix in _FAMILY_BY_PREFIX:
      family = _FAMILY_BY_PREFIX[prefix]
    elif version[0] >= _UNIFIED_NET_MAJOR:
      family = FrameworkFamily.NETCOREAPP
    else:
      family = FrameworkFamily.NETFRAMEWORK
    return TargetFramework(family=family, version=version, platform=platform)

  match = _COMPACT_RE.match(text)
  if match:
    digits, platform = match.groups()
    version = tuple(int(d) for d in digits)
    # net60 is an accepted spelling of net6.0
    family = FrameworkFamily.NETCOREAPP if version[0] >= _UNIFIED_NET_MAJOR else FrameworkFamily.NETFRAMEWORK
    return TargetFramework(family=family, version=version, platform=platform)

  return None
