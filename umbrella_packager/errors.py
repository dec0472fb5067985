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
"""Errors raised while loading and validating an umbrella build description."""

from __future__ import annotations

from typing import List, Optional


class DescriptorError(ValueError):
    """Base class for all build description errors.

    Every error carries the offending field so that tools can point the user
    at the exact place in the descriptor.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        if field:
            message = f"{field}: {message}"
        super().__init__(message)


class MalformedDescriptor(DescriptorError):
    """A required field is missing or has the wrong shape."""


class UnknownPlatform(DescriptorError):
    def __init__(self, platform: str, field: str = "targets"):
        self.platform = platform
        super().__init__(f"unknown platform '{platform}'", field)


class CyclicDependency(DescriptorError):
    def __init__(self, cycle: List[str]):
        self.cycle = list(cycle)
        super().__init__(
            "dependency cycle " + " -> ".join(self.cycle), "dependencies"
        )


class UndeclaredExport(DescriptorError):
    def __init__(self, module: str, declared: List[str]):
        self.module = module
        super().__init__(
            f"'{module}' is exported but not a declared dependency "
            f"(declared: {', '.join(declared) or 'none'})",
            "framework.export",
        )
