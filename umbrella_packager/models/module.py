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
"""Module dataclass for umbrella build descriptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..errors import MalformedDescriptor


def _join(prefix: str, key: str) -> str:
	return f"{prefix}.{key}" if prefix else key


def string_list(data: Dict[str, Any], key: str, prefix: str = "", *aliases: str) -> Tuple[str, ...]:
	"""Read an optional list of non-empty strings from data.

	Args:
		data: Declaration holding the list
		key: Preferred key of the list
		prefix: Field path of data, used in error messages
		aliases: Alternative keys accepted when key is absent

	Returns:
		Tuple of strings, empty if the key is absent
	"""
	value = data.get(key)
	for alias in aliases:
		if value is None:
			value = data.get(alias)
	if value is None:
		return ()
	if not isinstance(value, list) or not all(isinstance(v, str) and v for v in value):
		raise MalformedDescriptor("expected a list of non-empty strings", _join(prefix, key))
	return tuple(value)


def _sdk_level(value: Any, field_name: str) -> int:
	if isinstance(value, bool):
		raise MalformedDescriptor("expected an integer SDK level", field_name)
	try:
		level = int(value)
	except (TypeError, ValueError):
		raise MalformedDescriptor(f"expected an integer SDK level, got {value!r}", field_name) from None
	if level <= 0:
		raise MalformedDescriptor(f"SDK level must be positive, got {level}", field_name)
	return level


@dataclass(frozen=True)
class AndroidConfig:
	"""Android library settings of a module."""
	namespace: str
	compile_sdk: int
	min_sdk: int

	@classmethod
	def from_dict(cls, data: Any, prefix: str = "android") -> AndroidConfig:
		if not isinstance(data, dict):
			raise MalformedDescriptor("expected an object", prefix)
		namespace = data.get("namespace")
		if not isinstance(namespace, str) or not namespace:
			raise MalformedDescriptor("namespace is required", _join(prefix, "namespace"))
		if "compileSdk" not in data:
			raise MalformedDescriptor("compileSdk is required", _join(prefix, "compileSdk"))
		compile_sdk = _sdk_level(data["compileSdk"], _join(prefix, "compileSdk"))
		min_sdk = _sdk_level(data.get("minSdk", compile_sdk), _join(prefix, "minSdk"))
		if min_sdk > compile_sdk:
			raise MalformedDescriptor(
				f"minSdk {min_sdk} is higher than compileSdk {compile_sdk}", _join(prefix, "minSdk")
			)
		return cls(namespace=namespace, compile_sdk=compile_sdk, min_sdk=min_sdk)

	def to_dict(self) -> Dict[str, Any]:
		return {"namespace": self.namespace, "compileSdk": self.compile_sdk, "minSdk": self.min_sdk}


@dataclass(frozen=True)
class Module:
	"""A unit of shared code declared for aggregation.

	Targets are kept as declared (abstract identifiers); the resolver turns
	them into concrete PlatformTarget values.
	"""
	name: str
	targets: Tuple[str, ...]
	dependencies: Tuple[str, ...] = ()
	runtime: Optional[str] = None
	plugins: Tuple[str, ...] = ()
	source_sets: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
	android: Optional[AndroidConfig] = None

	@classmethod
	def from_dict(cls, name: Any, data: Dict[str, Any], prefix: str = "") -> Module:
		"""Create a Module from a declaration.

		Args:
			name: Module name
			data: Declaration with targets, dependencies, runtime, plugins,
				sourceSets and android keys
			prefix: Field path of the declaration, used in error messages

		Returns:
			Module instance

		Raises:
			MalformedDescriptor: if the name or targets are missing or a field
				has the wrong type
		"""
		if not isinstance(data, dict):
			raise MalformedDescriptor("expected an object", prefix or None)
		if not isinstance(name, str) or not name.strip():
			raise MalformedDescriptor("module name is required", _join(prefix, "name"))

		targets = string_list(data, "targets", prefix)
		if not targets:
			raise MalformedDescriptor("at least one target is required", _join(prefix, "targets"))

		dependencies = string_list(data, "dependencies", prefix, "deps")

		runtime = data.get("runtime")
		if runtime is not None and (not isinstance(runtime, str) or not runtime):
			raise MalformedDescriptor("expected a dependency notation", _join(prefix, "runtime"))

		source_sets: Dict[str, Tuple[str, ...]] = {}
		raw_sets = data.get("sourceSets", {})
		if not isinstance(raw_sets, dict):
			raise MalformedDescriptor("expected an object", _join(prefix, "sourceSets"))
		for set_name, set_data in raw_sets.items():
			set_prefix = _join(prefix, f"sourceSets.{set_name}")
			if isinstance(set_data, list):
				set_data = {"dependencies": set_data}
			if not isinstance(set_data, dict):
				raise MalformedDescriptor("expected an object or a list", set_prefix)
			source_sets[set_name] = string_list(set_data, "dependencies", set_prefix)

		# The embedded runtime is an implementation dependency of commonMain
		if runtime and runtime not in source_sets.get("commonMain", ()):
			source_sets["commonMain"] = source_sets.get("commonMain", ()) + (runtime,)

		android = None
		if data.get("android") is not None:
			android = AndroidConfig.from_dict(data["android"], _join(prefix, "android"))

		return cls(
			name=name,
			targets=targets,
			dependencies=dependencies,
			runtime=runtime,
			plugins=string_list(data, "plugins", prefix),
			source_sets=source_sets,
			android=android,
		)

	@classmethod
	def parse_modules(cls, modules_dict: Dict[str, Any], prefix: str = "modules") -> List[Module]:
		"""Parse a name -> declaration mapping into Module instances."""
		if not isinstance(modules_dict, dict):
			raise MalformedDescriptor("expected an object mapping module names to declarations", prefix)
		return [
			cls.from_dict(name, module_data, _join(prefix, name))
			for name, module_data in modules_dict.items()
		]

	def to_dict(self) -> Dict[str, Any]:
		"""Convert the Module back to its declaration form."""
		result: Dict[str, Any] = {"targets": list(self.targets)}
		if self.dependencies:
			result["dependencies"] = list(self.dependencies)
		if self.runtime:
			result["runtime"] = self.runtime
		if self.plugins:
			result["plugins"] = list(self.plugins)
		if self.source_sets:
			result["sourceSets"] = {k: list(v) for k, v in self.source_sets.items()}
		if self.android:
			result["android"] = self.android.to_dict()
		return result
