# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************
"""Gradle version catalog (libs.versions.toml) lookups.

Descriptors may refer to catalog entries the same way build scripts do, e.g.
``"libs.versions.android.compileSdk"`` or ``"libs.plugins.kotlinCocoapods"``.
Only the ``[versions]`` and ``[plugins]`` tables are read.
"""

from __future__ import annotations

import logging
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from .errors import MalformedDescriptor

logger = logging.getLogger(__name__)

VERSION_REF_PREFIX = "libs.versions."
PLUGIN_REF_PREFIX = "libs.plugins."


def normalize_alias(alias: str) -> str:
    """Gradle treats '-', '_' and '.' in aliases as the same separator."""
    return re.sub(r'[-_.]', '.', alias).lower()


@dataclass
class VersionCatalog:
    versions: Dict[str, str] = field(default_factory=dict)
    plugins: Dict[str, str] = field(default_factory=dict)

    @staticmethod
    def _table(data: Dict[str, Any], key: str, source: str) -> Dict[str, Any]:
        table = data.get(key, {})
        if not isinstance(table, dict):
            raise MalformedDescriptor(f"expected a table, got {table!r}", f"{source}.{key}")
        return table

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: str = "catalog") -> VersionCatalog:
        versions: Dict[str, str] = {}
        for alias, value in cls._table(data, "versions", source).items():
            if isinstance(value, dict):
                # rich version declaration, only the required/strict part is used
                value = value.get("strictly") or value.get("require") or value.get("prefer")
            if not isinstance(value, (str, int)):
                raise MalformedDescriptor(f"unsupported version declaration {value!r}", f"{source}.versions.{alias}")
            versions[normalize_alias(alias)] = str(value)

        plugins: Dict[str, str] = {}
        for alias, value in cls._table(data, "plugins", source).items():
            plugins[normalize_alias(alias)] = cls._plugin_notation(value, versions, f"{source}.plugins.{alias}")

        return cls(versions=versions, plugins=plugins)

    @staticmethod
    def _plugin_notation(value: Any, versions: Dict[str, str], field_name: str) -> str:
        if isinstance(value, str):
            return value
        if not isinstance(value, dict) or not isinstance(value.get("id"), str):
            raise MalformedDescriptor("plugin entry needs an 'id'", field_name)
        version = value.get("version")
        if isinstance(version, dict):
            ref = version.get("ref")
            if not isinstance(ref, str) or normalize_alias(ref) not in versions:
                raise MalformedDescriptor(f"unknown version reference {ref!r}", f"{field_name}.version.ref")
            version = versions[normalize_alias(ref)]
        return f"{value['id']}:{version}" if version else value["id"]

    def version(self, alias: str, field_name: str) -> str:
        try:
            return self.versions[normalize_alias(alias)]
        except KeyError:
            raise MalformedDescriptor(f"version alias '{alias}' not found in catalog", field_name) from None

    def plugin(self, alias: str, field_name: str) -> str:
        try:
            return self.plugins[normalize_alias(alias)]
        except KeyError:
            raise MalformedDescriptor(f"plugin alias '{alias}' not found in catalog", field_name) from None


def load_catalog(path: Path) -> VersionCatalog:
    """Load a TOML version catalog.

    Args:
        path: Path to libs.versions.toml

    Returns:
        VersionCatalog instance
    """
    with open(path, "rb") as f:
        data = tomllib.load(f)
    catalog = VersionCatalog.from_dict(data, source=Path(path).name)
    logger.info("Loaded %d versions and %d plugins from %s", len(catalog.versions), len(catalog.plugins), path)
    return catalog


def resolve_references(value: Any, catalog: VersionCatalog | None, field_name: str = "") -> Any:
    """Replace catalog references in a parsed descriptor.

    Walks dicts and lists. Plugin references without a catalog are kept as
    written; version references always need one.
    """
    if isinstance(value, dict):
        return {
            k: resolve_references(v, catalog, f"{field_name}.{k}" if field_name else k)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [resolve_references(v, catalog, f"{field_name}[{i}]") for i, v in enumerate(value)]
    if not isinstance(value, str):
        return value

    if value.startswith(VERSION_REF_PREFIX):
        if catalog is None:
            raise MalformedDescriptor(f"'{value}' needs a version catalog", field_name)
        return catalog.version(value[len(VERSION_REF_PREFIX):], field_name)
    if value.startswith(PLUGIN_REF_PREFIX) and catalog is not None:
        return catalog.plugin(value[len(PLUGIN_REF_PREFIX):], field_name)
    return value
