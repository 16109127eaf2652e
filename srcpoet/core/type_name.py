# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Fully qualified type identities.

A `TypeName` is a package plus the chain of simple names from the outermost
enclosing type to the innermost one (`java.util` + `Map`, `Entry`). Type
arguments ride along for rendering (`List<Hoverboard>`) but never take part in
identity: `List<A>` and `List<B>` name the same type.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Tuple

_IDENT_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*\Z")


def is_identifier(text: str) -> bool:
	"""True if `text` is a single identifier segment in the target grammar."""
	return bool(_IDENT_RE.match(text))


@dataclass(frozen=True)
class TypeName:
	"""Identity of a declared or external type."""

	package: str
	simple_names: Tuple[str, ...]
	type_arguments: Tuple["TypeName", ...] = field(default=(), compare=False)

	def __post_init__(self) -> None:
		# Accept lists from callers but store tuples so the value stays hashable.
		object.__setattr__(self, "simple_names", tuple(self.simple_names))
		object.__setattr__(self, "type_arguments", tuple(self.type_arguments))
		if not self.simple_names:
			raise ValueError("TypeName requires at least one simple name")
		for name in self.simple_names:
			if not is_identifier(name):
				raise ValueError(f"invalid simple name {name!r}")
		if self.package:
			for segment in self.package.split("."):
				if not is_identifier(segment):
					raise ValueError(f"invalid package name {self.package!r}")
		for arg in self.type_arguments:
			if not isinstance(arg, TypeName):
				raise ValueError(f"type argument must be a TypeName, got {type(arg).__name__}")

	@classmethod
	def get(cls, package: str, simple_name: str, *nested: str) -> "TypeName":
		"""`TypeName.get("java.util", "Map", "Entry")` -> `java.util.Map.Entry`."""
		return cls(package, (simple_name, *nested))

	@classmethod
	def parse(cls, canonical: str) -> "TypeName":
		"""
		Split a dotted name using the usual convention: lowercase leading segments
		form the package, the first capitalized segment starts the type chain.
		"""
		parts = canonical.split(".")
		for i, part in enumerate(parts):
			if part[:1].isupper():
				return cls(".".join(parts[:i]), tuple(parts[i:]))
		raise ValueError(f"no type segment in {canonical!r}")

	@property
	def simple_name(self) -> str:
		return self.simple_names[-1]

	@property
	def canonical_name(self) -> str:
		"""Dotted name without type arguments; no leading dot in the default package."""
		chain = ".".join(self.simple_names)
		return f"{self.package}.{chain}" if self.package else chain

	def nested(self, name: str) -> "TypeName":
		return TypeName(self.package, (*self.simple_names, name))

	def enclosing(self) -> Optional["TypeName"]:
		"""The directly enclosing type, or None for a top-level type."""
		if len(self.simple_names) == 1:
			return None
		return TypeName(self.package, self.simple_names[:-1])

	def top_level(self) -> "TypeName":
		return TypeName(self.package, self.simple_names[:1])

	def parameterized(self, *args: "TypeName") -> "TypeName":
		return TypeName(self.package, self.simple_names, args)

	def raw(self) -> "TypeName":
		"""This type with its type arguments dropped."""
		if not self.type_arguments:
			return self
		return TypeName(self.package, self.simple_names)

	def __str__(self) -> str:
		if not self.type_arguments:
			return self.canonical_name
		args = ", ".join(str(a) for a in self.type_arguments)
		return f"{self.canonical_name}<{args}>"


__all__ = ["TypeName", "is_identifier"]
