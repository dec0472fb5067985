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
from .artifact import FrameworkArtifact, FrameworkSlice
from .module import AndroidConfig, Module
from .packaging_spec import Linkage, PackagingSpec, load_packaging_spec
from .platform import PlatformTarget

__all__ = [
    "AndroidConfig",
    "FrameworkArtifact",
    "FrameworkSlice",
    "Linkage",
    "Module",
    "PackagingSpec",
    "PlatformTarget",
    "load_packaging_spec",
]
