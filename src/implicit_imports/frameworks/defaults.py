"""
Default Import Table.

Maps a target framework (family plus minimum version) and SDK flavour to the
ordered namespaces a project gets without declaring them. The table is a
flat, ordered tuple of rows; resolution walks it top to bottom, so the base
SDK row must precede the flavour rows that extend it.
"""

import logging
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from implicit_imports.enums import FrameworkFamily
from implicit_imports.frameworks.moniker import TargetFramework, parse_target_framework

logger = logging.getLogger(__name__)

BASE_SDK = "Microsoft.NET.Sdk"
WEB_SDK = "Microsoft.NET.Sdk.Web"
WORKER_SDK = "Microsoft.NET.Sdk.Worker"

_HOSTING_NAMESPACES = (
  "Microsoft.Extensions.Configuration",
  "Microsoft.Extensions.DependencyInjection",
  "Microsoft.Extensions.Hosting",
  "Microsoft.Extensions.Logging",
)


class DefaultImportEntry(BaseModel):
  """
  One row of the default import table.
  """

  model_config = ConfigDict(frozen=True)

  family: FrameworkFamily
  min_version: Tuple[int, ...]
  sdks: Tuple[str, ...] = Field(description="SDK names this row applies to.")
  namespaces: Tuple[str, ...]

  def applies_to(self, target: TargetFramework, sdk: str) -> bool:
    if target.family != self.family or not target.at_least(self.min_version):
      return False
    return sdk.lower() in {s.lower() for s in self.sdks}


DEFAULT_IMPORT_TABLE: Tuple[DefaultImportEntry, ...] = (
  DefaultImportEntry(
    family=FrameworkFamily.NETCOREAPP,
    min_version=(6, 0),
    sdks=(BASE_SDK, WEB_SDK, WORKER_SDK),
    namespaces=(
      "System",
      "System.Collections.Generic",
      "System.IO",
      "System.Linq",
      "System.Net.Http",
      "System.Threading",
      "System.Threading.Tasks",
    ),
  ),
  DefaultImportEntry(
    family=FrameworkFamily.NETCOREAPP,
    min_version=(6, 0),
    sdks=(WEB_SDK,),
    namespaces=(
      "System.Net.Http.Json",
      "Microsoft.AspNetCore.Builder",
      "Microsoft.AspNetCore.Hosting",
      "Microsoft.AspNetCore.Http",
      "Microsoft.AspNetCore.Routing",
    )
    + _HOSTING_NAMESPACES,
  ),
  DefaultImportEntry(
    family=FrameworkFamily.NETCOREAPP,
    min_version=(6, 0),
    sdks=(WORKER_SDK,),
    namespaces=_HOSTING_NAMESPACES,
  ),
)


def resolve_default_imports(
  identity: Optional[str],
  sdk: Optional[str] = None,
  table: Tuple[DefaultImportEntry, ...] = DEFAULT_IMPORT_TABLE,
) -> List[str]:
  """
  Looks up the default namespaces for a target identity.

  Unknown SDK names are treated as the base SDK. Unrecognised or unsupported
  identities yield an empty list without raising.

  Args:
      identity (Optional[str]): Target identity (e.g. 'net6.0').
      sdk (Optional[str]): SDK flavour of the project. Defaults to the base SDK.
      table: Table to search. Defaults to :data:`DEFAULT_IMPORT_TABLE`.

  Returns:
      List[str]: Ordered default namespaces (possibly empty).
  """
  target = parse_target_framework(identity)
  if target is None:
    logger.debug(f"Unrecognised target identity '{identity}'; no default imports.")
    return []

  sdk_name = sdk or BASE_SDK
  if not any(sdk_name.lower() in {s.lower() for s in row.sdks} for row in table):
    logger.debug(f"Unknown SDK '{sdk_name}'; using {BASE_SDK} defaults.")
    sdk_name = BASE_SDK

  namespaces: List[str] = []
  for row in table:
    if row.applies_to(target, sdk_name):
      namespaces.extend(row.namespaces)

  if not namespaces:
    logger.debug(f"No default imports for {target.family.value} {target.version}.")
  return namespaces
