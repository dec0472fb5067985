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
"""Produce the umbrella framework manifest from a build description.

Usage:
  umbrella-build --descriptor umbrella/umbrella.json \
      [--catalog gradle/libs.versions.toml] [--output manifest.json] [--dry-run]

Environment:
  UMBRELLA_CATALOG is used as catalog path when --catalog is not given.

Exit codes:
  0 success
  2 invalid build description
  3 cannot read input or write output
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import tomllib

from ..errors import DescriptorError
from ..packager import package
from .common import (
    EXIT_INVALID,
    EXIT_IO,
    EXIT_OK,
    add_descriptor_arguments,
    configure_logging,
    load_from_args,
    output_path,
)

MANIFEST_NAME = "manifest.json"


def parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Validate an umbrella build description and write its framework manifest")
    add_descriptor_arguments(p)
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(args.verbose)

    try:
        description = load_from_args(args)
        artifact = package(description)
    except DescriptorError as e:
        logging.error("Invalid build description %s: %s", args.descriptor, e)
        return EXIT_INVALID
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        logging.error("Cannot read input: %s", e)
        return EXIT_IO

    path = output_path(args, MANIFEST_NAME)
    try:
        artifact.write(path, dry_run=args.dry_run)
    except OSError as e:
        logging.error("Failed writing manifest: %s", e)
        return EXIT_IO

    if not args.dry_run:
        print(f"Generated {path} for {artifact.base_name} {artifact.version} ({len(artifact.targets)} targets)")
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
