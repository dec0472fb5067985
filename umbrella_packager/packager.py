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
"""Validate the module graph and produce the umbrella framework artifact."""

from __future__ import annotations

import graphlib
import logging
from typing import Dict, List, Tuple

from .errors import CyclicDependency, MalformedDescriptor, UndeclaredExport
from .loader import BuildDescription
from .models.artifact import FrameworkArtifact, FrameworkSlice
from .models.module import Module
from .models.packaging_spec import PackagingSpec
from .models.platform import PlatformTarget
from .resolver import resolve_targets

logger = logging.getLogger(__name__)

DEVICE_SLICE = "ios-arm64"


def check_acyclic(graph: Dict[str, Module]) -> None:
    """Raise CyclicDependency if any declared module reaches itself."""
    sorter = graphlib.TopologicalSorter()
    for name, module in graph.items():
        sorter.add(name, *module.dependencies)
    try:
        sorter.prepare()
    except graphlib.CycleError as e:
        # graphlib reports the cycle as [n1, ..., nk, n1] in reverse edge order
        cycle = list(reversed(e.args[1]))
        raise CyclicDependency(cycle) from None


def dependency_closure(graph: Dict[str, Module], root: str) -> Tuple[str, ...]:
    """Transitive dependencies of root, dependencies before their dependents.

    Modules that are referenced but not declared are treated as leaves.
    """
    reachable: List[str] = []
    pending = list(graph[root].dependencies)
    while pending:
        name = pending.pop(0)
        if name in reachable or name == root:
            continue
        reachable.append(name)
        if name in graph:
            pending.extend(graph[name].dependencies)

    sorter = graphlib.TopologicalSorter()
    for name in reachable:
        sorter.add(name, *(graph[name].dependencies if name in graph else ()))
    return tuple(sorter.static_order())


def check_exports(root: Module, packaging: PackagingSpec) -> None:
    """Every re-exported module must be a direct dependency of the umbrella."""
    for export in packaging.exports:
        if export not in root.dependencies:
            raise UndeclaredExport(export, list(root.dependencies))


def build_slices(targets: Tuple[PlatformTarget, ...], base_name: str) -> Tuple[FrameworkSlice, ...]:
    """Group Apple targets into XCFramework slices, device slice first."""
    framework = f"{base_name}.framework"
    slices: List[FrameworkSlice] = []

    device = tuple(t for t in targets if t.is_apple and not t.is_simulator)
    if device:
        slices.append(FrameworkSlice(DEVICE_SLICE, device, f"{DEVICE_SLICE}/{framework}"))

    simulator = tuple(t for t in targets if t.is_simulator)
    if simulator:
        archs = "_".join(sorted({t.architecture for t in simulator}))
        identifier = f"ios-{archs}-simulator"
        slices.append(FrameworkSlice(identifier, simulator, f"{identifier}/{framework}"))
    return tuple(slices)


def resolve_module_targets(description: BuildDescription) -> Dict[str, Tuple[PlatformTarget, ...]]:
    """Resolve the targets of every declared module, reachable or not."""
    return {
        name: resolve_targets(module.targets, f"modules.{name}.targets")
        for name, module in description.modules.items()
    }


def _warn_on_missing_targets(
    closure: Tuple[str, ...],
    module_targets: Dict[str, Tuple[PlatformTarget, ...]],
    targets: Tuple[PlatformTarget, ...],
) -> None:
    for name in closure:
        if name not in module_targets:
            logger.debug("Dependency %s is not declared, treating it as external", name)
            continue
        missing = [t.value for t in targets if t not in module_targets[name]]
        if missing:
            logger.warning("Module %s does not declare targets: %s", name, ", ".join(missing))


def package(description: BuildDescription) -> FrameworkArtifact:
    """Produce the artifact descriptor for an umbrella module.

    Args:
        description: Loaded build description

    Returns:
        FrameworkArtifact ready to be written as manifest

    Raises:
        UnknownPlatform: if a target identifier is not recognised
        CyclicDependency: if the module graph has a cycle
        UndeclaredExport: if an exported module is not a dependency
    """
    root = description.root
    packaging = description.packaging

    targets = resolve_targets(root.targets)
    module_targets = resolve_module_targets(description)
    check_acyclic(description.graph)
    check_exports(root, packaging)
    closure = dependency_closure(description.graph, root.name)
    _warn_on_missing_targets(closure, module_targets, targets)

    android = None
    if PlatformTarget.ANDROID in targets:
        android = root.android
        if android is None:
            logger.warning("%s targets Android but declares no android settings", root.name)
    elif root.android is not None:
        logger.info("Ignoring android settings of %s, no Android target requested", root.name)

    slices = build_slices(targets, packaging.base_name)
    if not slices:
        logger.info("%s has no Apple targets, no framework slices produced", root.name)

    artifact = FrameworkArtifact(
        base_name=packaging.base_name,
        version=packaging.version,
        linkage=packaging.linkage,
        deployment_target=packaging.deployment_target,
        exports=packaging.exports,
        targets=targets,
        slices=slices,
        dependencies=closure,
        plugins=root.plugins,
        android=android,
    )
    logger.info(
        "Packaged %s %s (%s) for %s",
        artifact.base_name, artifact.version, artifact.linkage.value,
        ", ".join(t.value for t in targets),
    )
    return artifact


def require_apple_targets(artifact: FrameworkArtifact) -> None:
    if not artifact.apple_targets:
        raise MalformedDescriptor("no Apple target to build a framework for", "targets")
