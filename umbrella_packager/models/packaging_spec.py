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
"""Packaging configuration of the umbrella framework."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from ..errors import MalformedDescriptor
from .module import string_list

DEFAULT_VERSION = "1.0.0"
DEFAULT_DEPLOYMENT_TARGET = "15.1"

SEMVER_RE = re.compile(
    r'^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)'
    r'(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?'
    r'(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?$'
)
OS_VERSION_RE = re.compile(r'^\d+(\.\d+){0,2}$')


class Linkage(str, Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"


@dataclass(frozen=True)
class PackagingSpec:
    """Framework name, version and distribution metadata."""
    base_name: str
    version: str = DEFAULT_VERSION
    linkage: Linkage = Linkage.STATIC
    deployment_target: str = DEFAULT_DEPLOYMENT_TARGET
    exports: Tuple[str, ...] = ()
    pod_name: Optional[str] = None
    summary: str = ""
    homepage: str = ""

    @property
    def is_static(self) -> bool:
        return self.linkage is Linkage.STATIC

    @property
    def pod(self) -> str:
        return self.pod_name or self.base_name


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    section = data.get(key, {})
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise MalformedDescriptor("expected an object", key)
    return section


def _optional_str(section: Dict[str, Any], key: str, field: str, default: str = "") -> str:
    value = section.get(key, default)
    if value is None:
        return default
    if not isinstance(value, str):
        raise MalformedDescriptor(f"expected a string, got {value!r}", field)
    return value


def _linkage(framework: Dict[str, Any]) -> Linkage:
    from_flag = None
    if "isStatic" in framework:
        if not isinstance(framework["isStatic"], bool):
            raise MalformedDescriptor("expected true or false", "framework.isStatic")
        from_flag = Linkage.STATIC if framework["isStatic"] else Linkage.DYNAMIC

    from_name = None
    if framework.get("linkage") is not None:
        try:
            from_name = Linkage(str(framework["linkage"]).lower())
        except ValueError:
            raise MalformedDescriptor(
                f"expected 'static' or 'dynamic', got {framework['linkage']!r}", "framework.linkage"
            ) from None

    if from_flag and from_name and from_flag is not from_name:
        raise MalformedDescriptor(
            f"isStatic and linkage disagree ({from_flag.value} vs {from_name.value})", "framework.linkage"
        )
    return from_name or from_flag or Linkage.STATIC


def load_packaging_spec(data: Dict[str, Any], module_name: str) -> PackagingSpec:
    """Read the framework and cocoapods blocks of a descriptor.

    Args:
        data: Parsed descriptor
        module_name: Name of the umbrella module, used as default base name

    Returns:
        PackagingSpec instance
    """
    framework = _section(data, "framework")
    cocoapods = _section(data, "cocoapods")

    base_name = _optional_str(framework, "baseName", "framework.baseName", module_name)
    if not base_name or not re.match(r'^[A-Za-z_][A-Za-z0-9_]*$', base_name):
        raise MalformedDescriptor(f"invalid framework name {base_name!r}", "framework.baseName")

    version = _optional_str(cocoapods, "version", "cocoapods.version", DEFAULT_VERSION)
    if not SEMVER_RE.match(version):
        raise MalformedDescriptor(f"expected a semantic version, got {version!r}", "cocoapods.version")

    deployment_target = _optional_str(
        cocoapods, "deploymentTarget", "cocoapods.deploymentTarget", DEFAULT_DEPLOYMENT_TARGET
    )
    if not OS_VERSION_RE.match(deployment_target):
        raise MalformedDescriptor(
            f"expected a dotted OS version, got {deployment_target!r}", "cocoapods.deploymentTarget"
        )

    exports = string_list(framework, "export", "framework")
    if not exports:
        # flat form used by short descriptors
        exports = string_list(data, "export")
    if len(set(exports)) != len(exports):
        raise MalformedDescriptor("duplicate entries", "framework.export")

    return PackagingSpec(
        base_name=base_name,
        version=version,
        linkage=_linkage(framework),
        deployment_target=deployment_target,
        exports=exports,
        pod_name=_optional_str(cocoapods, "name", "cocoapods.name") or None,
        summary=_optional_str(cocoapods, "summary", "cocoapods.summary"),
        homepage=_optional_str(cocoapods, "homepage", "cocoapods.homepage"),
    )
