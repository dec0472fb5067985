#!/usr/bin/env python3
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
"""Print the concrete build targets of platform identifiers, one per line."""

import argparse
import sys

from ..errors import UnknownPlatform
from ..resolver import resolve_targets


def main(argv=None):
    p = argparse.ArgumentParser(description="Resolve platform identifiers into concrete build targets")
    p.add_argument("platforms", nargs="+", help="Platform identifiers, e.g. android ios-device iosSimulatorArm64")
    args = p.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        targets = resolve_targets(args.platforms)
    except UnknownPlatform as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    for target in targets:
        print(target.value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
