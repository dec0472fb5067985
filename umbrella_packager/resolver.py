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
"""Expand abstract platform identifiers into concrete build targets."""

import logging
from typing import Dict, Iterable, List, Tuple

from .errors import UnknownPlatform
from .models.platform import PlatformTarget

logger = logging.getLogger(__name__)

_ANDROID = (PlatformTarget.ANDROID,)
_IOS_DEVICE = (PlatformTarget.IOS_ARM64,)
_IOS_SIMULATOR = (PlatformTarget.IOS_SIMULATOR_ARM64, PlatformTarget.IOS_X64)
_IOS_ALL = (PlatformTarget.IOS_X64, PlatformTarget.IOS_ARM64, PlatformTarget.IOS_SIMULATOR_ARM64)

# Keys are lower-case; lookups are case-insensitive
PLATFORM_ALIASES: Dict[str, Tuple[PlatformTarget, ...]] = {
    "android": _ANDROID,
    "a": _ANDROID,
    "ios": _IOS_ALL,
    "ios-device": _IOS_DEVICE,
    "b-device": _IOS_DEVICE,
    "ios-simulator": _IOS_SIMULATOR,
    "b-sim": _IOS_SIMULATOR,
    "b-simulator": _IOS_SIMULATOR,
}
PLATFORM_ALIASES.update({t.value.lower(): (t,) for t in PlatformTarget})


def expand_platform(identifier: str, field: str = "targets") -> Tuple[PlatformTarget, ...]:
    """Return the concrete targets of one identifier."""
    try:
        return PLATFORM_ALIASES[identifier.strip().lower()]
    except (KeyError, AttributeError):
        raise UnknownPlatform(str(identifier), field) from None


def resolve_targets(identifiers: Iterable[str], field: str = "targets") -> Tuple[PlatformTarget, ...]:
    """Resolve platform identifiers into concrete targets.

    The result keeps the order of the input. A target reached twice, e.g.
    through "ios" and "iosArm64", is kept at its first position.

    Args:
        identifiers: Abstract or concrete platform identifiers
        field: Field path reported on errors

    Returns:
        Tuple of PlatformTarget

    Raises:
        UnknownPlatform: for an unrecognised identifier
    """
    resolved: List[PlatformTarget] = []
    for identifier in identifiers:
        targets = expand_platform(identifier, field)
        logger.debug("Platform %s -> %s", identifier, ", ".join(t.value for t in targets))
        for target in targets:
            if target not in resolved:
                resolved.append(target)
    return tuple(resolved)
