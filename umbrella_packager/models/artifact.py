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
"""FrameworkArtifact dataclass: the manifest produced by the packager."""

from __future__ import annotations

import datetime as dt
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .module import AndroidConfig
from .packaging_spec import Linkage
from .platform import PlatformTarget

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameworkSlice:
	"""One library entry of the XCFramework."""
	identifier: str
	targets: Tuple[PlatformTarget, ...]
	framework_path: str

	@property
	def architectures(self) -> Tuple[str, ...]:
		return tuple(sorted({t.architecture for t in self.targets}))

	def to_dict(self) -> Dict[str, Any]:
		return {
			"identifier": self.identifier,
			"targets": [t.value for t in self.targets],
			"architectures": list(self.architectures),
			"path": self.framework_path,
		}


@dataclass(frozen=True)
class FrameworkArtifact:
	"""Distributable umbrella framework with its manifest data."""
	base_name: str
	version: str
	linkage: Linkage
	deployment_target: str
	exports: Tuple[str, ...]
	targets: Tuple[PlatformTarget, ...]
	slices: Tuple[FrameworkSlice, ...] = ()
	dependencies: Tuple[str, ...] = ()
	plugins: Tuple[str, ...] = ()
	android: Optional[AndroidConfig] = None

	@property
	def apple_targets(self) -> Tuple[PlatformTarget, ...]:
		return tuple(t for t in self.targets if t.is_apple)

	def to_dict(self) -> Dict[str, Any]:
		"""Convert the artifact to its JSON manifest form."""
		result: Dict[str, Any] = {
			"baseName": self.base_name,
			"version": self.version,
			"linkage": self.linkage.value,
			"deploymentTarget": self.deployment_target,
			"exports": list(self.exports),
			"targets": [t.value for t in self.targets],
			"slices": [s.to_dict() for s in self.slices],
			"dependencies": list(self.dependencies),
			"plugins": list(self.plugins),
		}
		if self.android:
			result["android"] = self.android.to_dict()
		return result

	def write(self, output_path: Path, dry_run: bool = False) -> None:
		"""Write the manifest to file or print it for dry-run.

		Args:
			output_path: Path to output file
			dry_run: If True, print instead of writing
		"""
		manifest = self.to_dict()
		manifest["timestamp"] = dt.datetime.now(dt.timezone.utc).replace(microsecond=0).isoformat()

		output_json = json.dumps(manifest, indent=4, sort_keys=False) + "\n"

		if dry_run:
			print(f"\nDry run: would write to {output_path}\n")
			print("---- BEGIN MANIFEST ----")
			print(output_json, end="")
			print("---- END MANIFEST ----")
		else:
			with open(output_path, "w", encoding="utf-8") as f:
				f.write(output_json)
			logger.info("Wrote manifest for %s %s to %s", self.base_name, self.version, output_path)
