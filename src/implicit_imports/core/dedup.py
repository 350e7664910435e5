"""
Order-preserving deduplication for namespace sequences.
"""

from typing import Iterable, List, Set


def deduplicate(sequence: Iterable[str]) -> List[str]:
  """
  Keeps the first occurrence of each entry and drops later repeats.

  Args:
      sequence (Iterable[str]): Namespaces, possibly repeated.

  Returns:
      List[str]: Unique namespaces in first-seen order.
  """
  seen: Set[str] = set()
  out: List[str] = []
  for item in sequence:
    if item not in seen:
      out.append(item)
      seen.add(item)
  return out
