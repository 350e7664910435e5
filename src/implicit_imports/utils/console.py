"""
Central Logging and Console Utilities.

Output goes through the Python standard `logging` library, rendered by
`rich`. The module keeps a stable ``console`` proxy whose backend can be
swapped at runtime (``set_console``), which lets callers such as a build
host or the test-suite capture the log stream in memory.

Attributes:
    console (_ConsoleProxy): A global, stable reference to the active Rich Console.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# Custom level for completed writes (between INFO and WARNING)
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "path": "bold blue",
    "namespace": "bold magenta",
  }
)

_LOGGER_NAME = "implicit_imports"


class _ConsoleProxy:
  """
  Forwarding wrapper around a `rich.console.Console`.

  Modules import the proxy once; the backend it forwards to may be replaced
  later. Replacing the backend re-binds the package logger's RichHandler so
  log records follow the new destination.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._configure_logging()

  def set_backend(self, new_console: Console) -> None:
    """
    Injects a new Console backend and updates logging handlers.

    Args:
        new_console (Console): The Rich Console instance to use.
    """
    self._backend = new_console
    self._configure_logging()

  def reset(self) -> None:
    """Restores a fresh standard output console."""
    self._backend = Console(theme=_THEME)
    self._configure_logging()

  @property
  def backend(self) -> Console:
    """
    Access the raw backend console.

    Returns:
        Console: The currently active implementation.
    """
    return self._backend

  def _configure_logging(self) -> None:
    # Handlers live on the package logger so host applications keep control of the root logger.
    logger = logging.getLogger(_LOGGER_NAME)
    for handler in list(logger.handlers):
      if isinstance(handler, RichHandler):
        logger.removeHandler(handler)

    rich_handler = RichHandler(
      console=self._backend,
      show_time=False,
      omit_repeated_times=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )
    logger.addHandler(rich_handler)

  def print(self, *args: Any, **kwargs: Any) -> None:
    """Forwards `print` calls to the active backend."""
    self._backend.print(*args, **kwargs)

  def export_text(self, **kwargs: Any) -> str:
    """
    Forwards `export_text` (useful for log capturing).

    Returns:
        str: The captured text output.
    """
    return self._backend.export_text(**kwargs)

  def __getattr__(self, name: str) -> Any:
    """Falls back to the backend for any other attribute."""
    return getattr(self._backend, name)


_log = logging.getLogger(_LOGGER_NAME)


def _apply_default_level(logger: logging.Logger) -> None:
  """
  Lets INFO messages through when the host has not configured logging.

  A logger the host already set, or a host root level of INFO or lower
  (e.g. DEBUG), is left alone so module debug lines stay reachable.

  Args:
      logger (logging.Logger): The package logger.
  """
  if logger.level == logging.NOTSET and logger.getEffectiveLevel() > logging.INFO:
    logger.setLevel(logging.INFO)


_apply_default_level(_log)

console = _ConsoleProxy()


def set_log_level(level: int) -> None:
  """
  Sets the verbosity of the package logger.

  Args:
      level (int): A `logging` level, e.g. ``logging.DEBUG``.
  """
  _log.setLevel(level)


def set_console(new_console: Console) -> None:
  """
  Redirects console output and package logging to ``new_console``.

  Args:
      new_console (Console): The configured Rich console to use globally.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Resets logging and console to standard output."""
  console.reset()


def get_console() -> Console:
  """
  Retrieves the currently active console backend.

  Returns:
      Console: The active Rich Console.
  """
  return console.backend


def log_info(msg: str) -> None:
  """
  Logs an informational message.

  Args:
      msg (str): The message content. Can include rich markup like [bold].
  """
  _log.info(f"ℹ️  {msg}", extra={"markup": True})


def log_success(msg: str) -> None:
  """
  Logs a success message at the custom SUCCESS level.

  Args:
      msg (str): The message content.
  """
  _log.log(SUCCESS_LEVEL_NUM, f"✅ {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  """
  Logs a warning message.

  Args:
      msg (str): The message content.
  """
  _log.warning(f"⚠️  {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  """
  Logs an error message.

  Args:
      msg (str): The message content.
  """
  _log.error(f"❌ {msg}", extra={"markup": True})
