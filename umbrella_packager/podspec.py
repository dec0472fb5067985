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
"""Render the CocoaPods podspec of the umbrella framework."""

from typing import List, Optional

from .models.artifact import FrameworkArtifact
from .models.packaging_spec import Linkage, PackagingSpec
from .packager import require_apple_targets

FRAMEWORK_DIR = "build/cocoapods/framework"


def _ruby_str(value: str) -> str:
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def _attribute(name: str, value: str) -> str:
    return f"    spec.{name:<26} = {value}\n"


def generate_podspec(artifact: FrameworkArtifact, packaging: PackagingSpec, timestamp: Optional[str] = None) -> str:
    """Generate the podspec content for a packaged umbrella.

    Args:
        artifact: Artifact produced by the packager
        packaging: Packaging data holding pod name, summary and homepage
        timestamp: Optional generation time written into the header

    Returns:
        Podspec file content
    """
    require_apple_targets(artifact)

    header = ""
    if timestamp:
        header = (
            f"# Generated at {timestamp}\n"
            "# Do not edit manually - use umbrella-podspec\n"
            "\n"
        )

    lines: List[str] = [
        _attribute("name", _ruby_str(packaging.pod)),
        _attribute("version", _ruby_str(artifact.version)),
        _attribute("homepage", _ruby_str(packaging.homepage)),
        _attribute("source", "{ :http=> ''}"),
        _attribute("authors", "''"),
        _attribute("license", "''"),
        _attribute("summary", _ruby_str(packaging.summary)),
        _attribute("vendored_frameworks", _ruby_str(f"{FRAMEWORK_DIR}/{artifact.base_name}.framework")),
        _attribute("libraries", "'c++'"),
        _attribute("ios.deployment_target", _ruby_str(artifact.deployment_target)),
    ]
    if artifact.linkage is Linkage.STATIC:
        lines.append(_attribute("static_framework", "true"))

    return header + "Pod::Spec.new do |spec|\n" + "".join(lines) + "end\n"
