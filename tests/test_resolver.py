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
import pytest

from umbrella_packager.errors import UnknownPlatform
from umbrella_packager.models import PlatformTarget
from umbrella_packager.resolver import resolve_targets


@pytest.mark.Description("Abstract platforms expand to concrete targets in declaration order")
@pytest.mark.TestType("requirements-based")
class TestResolveTargets:
    def test_abstract_platforms(self):
        assert resolve_targets(["A", "B-device", "B-sim"]) == (
            PlatformTarget.ANDROID,
            PlatformTarget.IOS_ARM64,
            PlatformTarget.IOS_SIMULATOR_ARM64,
            PlatformTarget.IOS_X64,
        )

    def test_concrete_targets_keep_order(self):
        assert resolve_targets(["iosSimulatorArm64", "androidTarget", "iosX64"]) == (
            PlatformTarget.IOS_SIMULATOR_ARM64,
            PlatformTarget.ANDROID,
            PlatformTarget.IOS_X64,
        )

    def test_case_insensitive(self):
        assert resolve_targets(["Android", "IOSARM64"]) == (PlatformTarget.ANDROID, PlatformTarget.IOS_ARM64)

    def test_duplicates_keep_first_position(self):
        assert resolve_targets(["iosArm64", "ios", "android", "A"]) == (
            PlatformTarget.IOS_ARM64,
            PlatformTarget.IOS_X64,
            PlatformTarget.IOS_SIMULATOR_ARM64,
            PlatformTarget.ANDROID,
        )

    def test_empty(self):
        assert resolve_targets([]) == ()

    @pytest.mark.parametrize(
        "platforms",
        [["android", "ios"], ["B-sim", "A"], ["iosX64", "ios-device", "iosX64"]],
    )
    def test_idempotent(self, platforms):
        first = resolve_targets(platforms)
        assert resolve_targets(platforms) == first
        assert resolve_targets([t.value for t in first]) == first

    def test_unknown_platform(self):
        with pytest.raises(UnknownPlatform) as exc_info:
            resolve_targets(["android", "watchosArm64"])
        assert exc_info.value.platform == "watchosArm64"
        assert exc_info.value.field == "targets"

    def test_unknown_platform_field(self):
        with pytest.raises(UnknownPlatform) as exc_info:
            resolve_targets(["linuxX64"], field="modules.Core.targets")
        assert "modules.Core.targets" in str(exc_info.value)


def test_target_properties():
    assert PlatformTarget.ANDROID.family == "android"
    assert not PlatformTarget.ANDROID.is_apple
    assert PlatformTarget.IOS_ARM64.is_apple and not PlatformTarget.IOS_ARM64.is_simulator
    assert PlatformTarget.IOS_X64.is_simulator
    assert PlatformTarget.IOS_X64.architecture == "x86_64"
