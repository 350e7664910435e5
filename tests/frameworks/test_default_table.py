"""
Tests for the Default Import Table.

Verifies:
1. net6.0 and newer resolve to the documented list, in order.
2. Older, non-.NETCoreApp and unknown targets resolve to an empty list.
3. SDK flavours extend the base list after it.
"""

import logging

import pytest

from implicit_imports.enums import FrameworkFamily
from implicit_imports.frameworks.defaults import (
  DEFAULT_IMPORT_TABLE,
  DefaultImportEntry,
  WEB_SDK,
  WORKER_SDK,
  resolve_default_imports,
)

NET6_DEFAULTS = [
  "System",
  "System.Collections.Generic",
  "System.IO",
  "System.Linq",
  "System.Net.Http",
  "System.Threading",
  "System.Threading.Tasks",
]


@pytest.mark.parametrize("identity", ["net6.0", "net7.0", "net6.0-windows", ".NETCoreApp,Version=v6.0", "net8.0"])
def test_supported_targets_get_documented_defaults(identity):
  assert resolve_default_imports(identity) == NET6_DEFAULTS


@pytest.mark.parametrize("identity", ["net5.0", "netcoreapp3.1", "netstandard2.1", "net48", "not-a-tfm", ""])
def test_unsupported_targets_resolve_empty(identity):
  assert resolve_default_imports(identity) == []


def test_unknown_identity_is_logged_at_debug(caplog):
  with caplog.at_level(logging.DEBUG, logger="implicit_imports"):
    assert resolve_default_imports("mystery9.9") == []
  assert "mystery9.9" in caplog.text


def test_web_sdk_appends_aspnet_namespaces():
  result = resolve_default_imports("net6.0", sdk=WEB_SDK)
  assert result[: len(NET6_DEFAULTS)] == NET6_DEFAULTS
  assert result[len(NET6_DEFAULTS)] == "System.Net.Http.Json"
  assert "Microsoft.AspNetCore.Builder" in result
  assert result[-1] == "Microsoft.Extensions.Logging"
  assert len(result) == len(set(result))


def test_worker_sdk_appends_hosting_namespaces():
  result = resolve_default_imports("net6.0", sdk=WORKER_SDK)
  assert result == NET6_DEFAULTS + [
    "Microsoft.Extensions.Configuration",
    "Microsoft.Extensions.DependencyInjection",
    "Microsoft.Extensions.Hosting",
    "Microsoft.Extensions.Logging",
  ]


def test_sdk_match_is_case_insensitive():
  assert resolve_default_imports("net6.0", sdk="microsoft.net.sdk.worker") == resolve_default_imports(
    "net6.0", sdk=WORKER_SDK
  )


def test_unknown_sdk_falls_back_to_base():
  assert resolve_default_imports("net6.0", sdk="Acme.Sdk") == NET6_DEFAULTS


def test_flavour_on_unsupported_target_is_empty():
  assert resolve_default_imports("net5.0", sdk=WEB_SDK) == []


def test_custom_table_is_honoured():
  table = (
    DefaultImportEntry(
      family=FrameworkFamily.NETSTANDARD,
      min_version=(2, 1),
      sdks=("Microsoft.NET.Sdk",),
      namespaces=("Only.This",),
    ),
  )
  assert resolve_default_imports("netstandard2.1", table=table) == ["Only.This"]
  assert resolve_default_imports("netstandard2.0", table=table) == []
  assert resolve_default_imports("net6.0", table=table) == []


def test_table_is_immutable():
  row = DEFAULT_IMPORT_TABLE[0]
  with pytest.raises(Exception):
    row.namespaces = ("Hacked",)
  assert isinstance(row.namespaces, tuple)
