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
"""Argument handling shared by the command line tools."""

import argparse
import logging
import os
from pathlib import Path
from typing import Optional

from ..catalog import load_catalog
from ..loader import BuildDescription, load_descriptor

CATALOG_ENV = "UMBRELLA_CATALOG"

EXIT_OK = 0
EXIT_INVALID = 2
EXIT_IO = 3


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')
    if verbose:
        logging.getLogger().setLevel(logging.INFO)


def add_descriptor_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--descriptor",
        type=Path,
        default=Path("umbrella.json"),
        help="Path to the umbrella build description (default: umbrella.json)"
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help=f"Path to libs.versions.toml (default: ${CATALOG_ENV} if set)"
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output file path (default: next to the descriptor)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print generated content instead of writing to file"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )


def catalog_path(args: argparse.Namespace) -> Optional[Path]:
    if args.catalog:
        return args.catalog
    from_env = os.environ.get(CATALOG_ENV)
    return Path(from_env) if from_env else None


def load_from_args(args: argparse.Namespace) -> BuildDescription:
    """Load the descriptor (and catalog) named on the command line."""
    path = catalog_path(args)
    catalog = load_catalog(path) if path else None
    return load_descriptor(args.descriptor, catalog)


def output_path(args: argparse.Namespace, file_name: str) -> Path:
    if args.output:
        return args.output
    return args.descriptor.resolve().parent / file_name
