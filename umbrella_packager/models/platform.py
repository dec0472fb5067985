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
"""Concrete build targets of the umbrella module."""

from __future__ import annotations

from enum import Enum


class PlatformTarget(Enum):
    """A concrete OS/architecture combination.

    The value is the target name as written in the Kotlin Multiplatform DSL.
    """

    ANDROID = "androidTarget"
    IOS_ARM64 = "iosArm64"
    IOS_X64 = "iosX64"
    IOS_SIMULATOR_ARM64 = "iosSimulatorArm64"

    @property
    def family(self) -> str:
        return "android" if self is PlatformTarget.ANDROID else "ios"

    @property
    def is_apple(self) -> bool:
        return self.family == "ios"

    @property
    def is_simulator(self) -> bool:
        return self in (PlatformTarget.IOS_X64, PlatformTarget.IOS_SIMULATOR_ARM64)

    @property
    def architecture(self) -> str:
        return {
            PlatformTarget.ANDROID: "jvm",
            PlatformTarget.IOS_ARM64: "arm64",
            PlatformTarget.IOS_X64: "x86_64",
            PlatformTarget.IOS_SIMULATOR_ARM64: "arm64",
        }[self]
