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
"""Build description interpreter for umbrella framework modules."""

from .errors import (
    CyclicDependency,
    DescriptorError,
    MalformedDescriptor,
    UndeclaredExport,
    UnknownPlatform,
)
from .loader import BuildDescription, load_descriptor, parse_descriptor
from .packager import package
from .resolver import resolve_targets

__version__ = "0.1.0"

__all__ = [
    "BuildDescription",
    "CyclicDependency",
    "DescriptorError",
    "MalformedDescriptor",
    "UndeclaredExport",
    "UnknownPlatform",
    "load_descriptor",
    "package",
    "parse_descriptor",
    "resolve_targets",
]
