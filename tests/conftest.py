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
import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

logger = logging.getLogger(__name__)

CATALOG_TOML = """\
[versions]
kotlin = "2.1.0"
android-compileSdk = "35"
android-minSdk = "24"

[plugins]
kotlinMultiplatform = { id = "org.jetbrains.kotlin.multiplatform", version.ref = "kotlin" }
kotlinCocoapods = { id = "org.jetbrains.kotlin.native.cocoapods", version.ref = "kotlin" }
androidLibrary = "com.android.library:8.7.3"
"""


@pytest.fixture
def umbrella_data() -> Dict[str, Any]:
    """Umbrella module aggregating Core, as declared by the showcase app."""
    return {
        "name": "Umbrella",
        "plugins": ["libs.plugins.kotlinMultiplatform", "libs.plugins.kotlinCocoapods"],
        "targets": ["androidTarget", "iosX64", "iosArm64", "iosSimulatorArm64"],
        "dependencies": ["Core"],
        "runtime": "compose.runtime",
        "framework": {"baseName": "Umbrella", "isStatic": True, "export": ["Core"]},
        "cocoapods": {
            "version": "1.0.0",
            "summary": "Umbrella framework aggregating shared KMP modules",
            "homepage": "https://github.com/Adnan-Isnain/showcase-mobile-app",
            "deploymentTarget": "15.1",
        },
        "android": {
            "namespace": "com.adnanisnain.showcase.umbrella",
            "compileSdk": "libs.versions.android.compileSdk",
            "minSdk": "libs.versions.android.minSdk",
        },
        "modules": {
            "Core": {"targets": ["android", "ios"]},
        },
    }


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    path = tmp_path / "libs.versions.toml"
    path.write_text(CATALOG_TOML)
    return path


@pytest.fixture
def write_descriptor(tmp_path: Path) -> Callable[[Dict[str, Any]], Path]:
    def _write(data: Dict[str, Any], name: str = "umbrella.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=4))
        logger.debug(f"Wrote descriptor {path}")
        return path

    return _write


def pytest_configure(config):
    config.addinivalue_line("markers", "Description: Description of the test")
    config.addinivalue_line("markers", "TestType: Type of the test")


def pytest_collection_modifyitems(session, config, items):
    """Expose custom markers as user properties in the junit report."""
    for item in items:
        for marker in item.iter_markers():
            if marker.name in ("Description", "TestType"):
                item.user_properties.append((marker.name, marker.args))
