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
"""Load an umbrella build description.

A descriptor is a JSON object declaring the umbrella module itself and,
optionally, the modules it aggregates::

    {
        "name": "Umbrella",
        "plugins": ["libs.plugins.kotlinMultiplatform", "libs.plugins.kotlinCocoapods"],
        "targets": ["android", "ios"],
        "dependencies": ["Core"],
        "runtime": "compose.runtime",
        "framework": {"baseName": "Umbrella", "isStatic": true, "export": ["Core"]},
        "cocoapods": {"version": "1.0.0", "deploymentTarget": "15.1"},
        "android": {"namespace": "com.example.umbrella", "compileSdk": 35, "minSdk": 24},
        "modules": {"Core": {"targets": ["android", "ios"]}}
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .catalog import VersionCatalog, resolve_references
from .errors import MalformedDescriptor
from .models.module import Module
from .models.packaging_spec import PackagingSpec, load_packaging_spec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildDescription:
    """Umbrella module, the modules declared next to it and packaging data."""
    root: Module
    packaging: PackagingSpec
    modules: Dict[str, Module] = field(default_factory=dict)

    @property
    def graph(self) -> Dict[str, Module]:
        """All declared modules by name, the umbrella included."""
        return {self.root.name: self.root, **self.modules}


def parse_descriptor(data: Any, catalog: Optional[VersionCatalog] = None) -> BuildDescription:
    """Create a BuildDescription from a parsed descriptor.

    Args:
        data: Descriptor object
        catalog: Version catalog used to resolve libs.* references

    Returns:
        BuildDescription instance

    Raises:
        MalformedDescriptor: if a required field is missing or malformed
    """
    if not isinstance(data, dict):
        raise MalformedDescriptor("expected a JSON object at top level")

    data = resolve_references(data, catalog)

    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise MalformedDescriptor("module name is required", "name")

    root = Module.from_dict(name, data)

    modules: Dict[str, Module] = {}
    for module in Module.parse_modules(data.get("modules") or {}):
        if module.name == root.name:
            raise MalformedDescriptor(f"'{module.name}' redeclares the umbrella module", f"modules.{module.name}")
        modules[module.name] = module

    packaging = load_packaging_spec(data, root.name)
    logger.info(
        "Loaded %s with %d dependencies and %d declared modules",
        root.name, len(root.dependencies), len(modules),
    )
    return BuildDescription(root=root, packaging=packaging, modules=modules)


def load_descriptor(path: Union[str, Path], catalog: Optional[VersionCatalog] = None) -> BuildDescription:
    """Load and parse a descriptor file.

    Args:
        path: Path to the JSON descriptor
        catalog: Version catalog used to resolve libs.* references

    Returns:
        BuildDescription instance
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Descriptor file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return parse_descriptor(data, catalog)
