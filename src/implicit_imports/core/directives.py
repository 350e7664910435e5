"""
Import Directives.

User-declared ``Include`` / ``Remove`` instructions. Build configuration may
pack several namespaces into one value separated by semicolons; those are
expanded here into one directive per namespace before merging.
"""

from typing import Any, Iterable, List, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from implicit_imports.enums import ImportAction

ITEM_SEPARATOR = ";"


class ImportDirective(BaseModel):
  """
  A single namespace paired with the action to apply to it.

  Namespace text is compared by exact, case-sensitive match. Directive
  expansion strips surrounding whitespace; nothing else is normalised.
  """

  model_config = ConfigDict(frozen=True)

  value: str = Field(min_length=1, description="Namespace, e.g. 'System.IO'.")
  action: ImportAction = Field(ImportAction.INCLUDE, description="Include or Remove.")

  @field_validator("action", mode="before")
  @classmethod
  def parse_action(cls, v: Any) -> ImportAction:
    """
    Accepts action names in any letter case.

    Args:
        v (Any): Raw action ('include', 'Remove', or an ImportAction).

    Returns:
        ImportAction: The parsed action.
    """
    return ImportAction.parse(v)

  @classmethod
  def include(cls, value: str) -> "ImportDirective":
    """Shorthand for an Include directive."""
    return cls(value=value, action=ImportAction.INCLUDE)

  @classmethod
  def remove(cls, value: str) -> "ImportDirective":
    """Shorthand for a Remove directive."""
    return cls(value=value, action=ImportAction.REMOVE)


DirectiveLike = Union[ImportDirective, Mapping[str, Any]]


def split_item_spec(value: str) -> List[str]:
  """
  Splits a semicolon-delimited item value.

  Segments are stripped of surrounding whitespace and empty segments are
  dropped, the way build engines expand item lists.

  Args:
      value (str): Raw value (e.g. 'A;B; C').

  Returns:
      List[str]: The individual segments in order (e.g. ['A', 'B', 'C']).
  """
  return [segment.strip() for segment in value.split(ITEM_SEPARATOR) if segment.strip()]


def expand_directives(entries: Iterable[DirectiveLike]) -> List[ImportDirective]:
  """
  Expands directives into one directive per namespace.

  Every value goes through :func:`split_item_spec`, whether or not it holds
  a semicolon, so 'System.IO ' and 'System.IO ;' mean the same thing. A value
  that is only whitespace expands to nothing. Accepts ready ``ImportDirective`` objects or mappings with ``value`` and
  ``action`` keys. Declared order is preserved, including the order of
  segments within a single value.

  Args:
      entries: Directives in declaration order.

  Returns:
      List[ImportDirective]: One directive per namespace.

  Raises:
      pydantic.ValidationError: If a mapping entry is malformed.
  """
  expanded: List[ImportDirective] = []
  for entry in entries:
    directive = entry if isinstance(entry, ImportDirective) else ImportDirective.model_validate(entry)
    for segment in split_item_spec(directive.value):
      if segment == directive.value:
        expanded.append(directive)
      else:
        expanded.append(ImportDirective(value=segment, action=directive.action))
  return expanded
