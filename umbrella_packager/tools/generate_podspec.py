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
"""
Generate the <PodName>.podspec of an umbrella framework.

Usage:
  umbrella-podspec --descriptor umbrella/umbrella.json \
      [--catalog gradle/libs.versions.toml] [--output Umbrella.podspec]

The build description is validated exactly as umbrella-build does it before
anything is written.
"""
from __future__ import annotations

import argparse
import datetime as dt
import json
import logging
import sys
import tomllib

from ..errors import DescriptorError
from ..packager import package
from ..podspec import generate_podspec
from .common import (
    EXIT_INVALID,
    EXIT_IO,
    EXIT_OK,
    add_descriptor_arguments,
    configure_logging,
    load_from_args,
    output_path,
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate the CocoaPods podspec for an umbrella framework",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Write Umbrella.podspec next to the descriptor
  umbrella-podspec --descriptor umbrella/umbrella.json

  # Resolve libs.* references through a version catalog and preview
  umbrella-podspec --descriptor umbrella/umbrella.json \\
      --catalog gradle/libs.versions.toml --dry-run
        """
    )
    add_descriptor_arguments(parser)
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(args.verbose)

    try:
        description = load_from_args(args)
        artifact = package(description)
        timestamp = dt.datetime.now(dt.timezone.utc).replace(microsecond=0).isoformat()
        content = generate_podspec(artifact, description.packaging, timestamp)
    except DescriptorError as e:
        logging.error("Invalid build description %s: %s", args.descriptor, e)
        return EXIT_INVALID
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        logging.error("Cannot read input: %s", e)
        return EXIT_IO

    path = output_path(args, f"{description.packaging.pod}.podspec")
    if args.dry_run:
        print(f"Dry run: would write to {path}\n")
        print("---- BEGIN GENERATED CONTENT ----")
        print(content, end="")
        print("---- END GENERATED CONTENT ----")
        return EXIT_OK

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        logging.error("Failed writing podspec: %s", e)
        return EXIT_IO
    print(f"Generated {path}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
