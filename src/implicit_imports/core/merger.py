"""
Override Merger.

Appends user includes to the default namespaces, then strips every namespace
named by a remove directive. Duplicates are left in place for the
deduplicator.
"""

import logging
from typing import Iterable, List, Sequence, Set

from implicit_imports.core.directives import ImportDirective
from implicit_imports.enums import ImportAction

logger = logging.getLogger(__name__)


def merge_imports(defaults: Sequence[str], directives: Iterable[ImportDirective]) -> List[str]:
  """
  Combines defaults with user directives.

  1. Start from ``defaults`` in the given order.
  2. Append each include, in declared order, even when already present.
  3. Drop every entry named by any remove directive, wherever it came from.

  A remove naming an absent namespace does nothing.

  Args:
      defaults (Sequence[str]): Gated framework defaults.
      directives (Iterable[ImportDirective]): Expanded user directives.

  Returns:
      List[str]: The merged sequence (may contain duplicates).
  """
  merged: List[str] = list(defaults)
  removed: Set[str] = set()

  for directive in directives:
    if directive.action is ImportAction.INCLUDE:
      merged.append(directive.value)
    else:
      removed.add(directive.value)

  if removed:
    unmatched = removed.difference(merged)
    if unmatched:
      logger.debug(f"Remove directives matched nothing: {sorted(unmatched)}")

  return [namespace for namespace in merged if namespace not in removed]
