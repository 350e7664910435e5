"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Snapshot testing fixture for generated artifact text.
- Console isolation so log capture in one test does not leak into others.
"""

import sys
import pytest
from io import StringIO
from pathlib import Path
from typing import Callable, Optional

# Add src to path so we can import 'implicit_imports' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from rich.console import Console  # noqa: E402

from implicit_imports.utils.console import reset_console, set_console  # noqa: E402


class SnapshotAssert:
  """
  Simple snapshot comparison logic to verify generated output stability.
  """

  def __init__(self, request: pytest.FixtureRequest):
    self.request = request
    self.test_name = request.node.name
    self.module_path = Path(request.node.fspath).parent
    self.snapshot_dir = self.module_path / "__snapshots__"
    self.update_mode = request.config.getoption("--update-snapshots", default=False)

  def assert_match(self, content: str, extension: str = "txt", normalizer: Optional[Callable[[str], str]] = None):
    """
    Compares content against stored file.

    Args:
        content: The actual output string.
        extension: File extension (default 'txt').
        normalizer: Optional function applied to both sides before comparison.
    """
    if not self.snapshot_dir.exists():
      self.snapshot_dir.mkdir(parents=True)

    snapshot_file = self.snapshot_dir / f"{self.test_name}.{extension}"

    if self.update_mode or not snapshot_file.exists():
      snapshot_file.write_bytes((normalizer(content) if normalizer else content).encode("utf-8"))
      if self.update_mode:
        return

    # Byte-exact comparison; artifacts must be reproducible.
    expected = snapshot_file.read_bytes().decode("utf-8")

    lhs = content
    rhs = expected

    if normalizer:
      lhs = normalizer(lhs)
      rhs = normalizer(rhs)

    assert lhs == rhs, (
      f"Snapshot mismatch for {snapshot_file.name}. Run pytest with --update-snapshots to accept changes."
    )


@pytest.fixture
def snapshot(request):
  """Fixture to assert text matches a stored snapshot."""
  return SnapshotAssert(request)


@pytest.fixture
def log_buffer():
  """
  Redirects package logging into an in-memory console.

  Yields:
      StringIO: Buffer receiving rendered log lines.
  """
  buf = StringIO()
  set_console(Console(file=buf, width=200, force_terminal=False))
  yield buf
  reset_console()


@pytest.fixture
def obj_dir(tmp_path):
  """An intermediate output directory, as a build would pass it (not created yet)."""
  return tmp_path / "obj" / "Debug" / "net6.0"


def pytest_addoption(parser):
  """Add CLI flag to update snapshots."""
  parser.addoption("--update-snapshots", action="store_true", default=False, help="Update snapshots for visual tests")
