# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
A source file: package clause, imports, one top-level declaration.

`SourceFile` is the public entry point. It is immutable; every `render()` call
builds a fresh resolution context, so rendering the same file twice (or
rendering different files on different threads) shares no state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from .core.type_name import TypeName, is_identifier
from .emit.code_writer import render
from .emit.context import ResolutionContext
from .emit.imports import WILDCARD, StaticImportRecord
from .model import TypeDecl

logger = logging.getLogger(__name__)

WELL_KNOWN_NAMESPACE = "java.lang"


@dataclass(frozen=True)
class FileOptions:
	"""
	Per-file rendering options.

	- `leading_comment`: printed as `//` lines before the package clause; blank
	  lines in it become bare `//` lines.
	- `skip_well_known_namespace_imports`: drop import lines for types in
	  `well_known_namespace` (they still claim their simple name).
	- `static_imports`: `(type, member)` pairs, `member` may be `"*"`.
	- `indent`: one indentation level of the output.
	"""

	leading_comment: Optional[str] = None
	skip_well_known_namespace_imports: bool = False
	well_known_namespace: str = WELL_KNOWN_NAMESPACE
	static_imports: Tuple[Tuple[TypeName, str], ...] = ()
	indent: str = "  "

	def __post_init__(self) -> None:
		object.__setattr__(self, "static_imports", tuple(tuple(entry) for entry in self.static_imports))
		for entry in self.static_imports:
			if len(entry) != 2 or not isinstance(entry[0], TypeName):
				raise ValueError(f"static import must be a (TypeName, member) pair, got {entry!r}")
			member = entry[1]
			if member != WILDCARD and not is_identifier(member):
				raise ValueError(f"invalid static import member {member!r}")
		if self.indent.strip():
			raise ValueError("indent must be whitespace")


@dataclass(frozen=True)
class SourceFile:
	package_name: str
	type_decl: TypeDecl
	options: FileOptions = field(default_factory=FileOptions)

	def __post_init__(self) -> None:
		if self.package_name:
			for segment in self.package_name.split("."):
				if not is_identifier(segment):
					raise ValueError(f"invalid package name {self.package_name!r}")

	@classmethod
	def construct(cls, package_name: str, type_decl: TypeDecl, options: Optional[FileOptions] = None) -> "SourceFile":
		return cls(package_name, type_decl, options or FileOptions())

	def with_static_import(self, type_name: TypeName, *members: str) -> "SourceFile":
		"""A copy of this file with `type_name.member` registered for each member."""
		entries = self.options.static_imports + tuple((type_name, m) for m in members)
		return replace(self, options=replace(self.options, static_imports=entries))

	def render(self) -> str:
		opts = self.options
		logger.debug(f"[emit] rendering {self.package_name or '<default>'}.{self.type_decl.name}")
		context = ResolutionContext(
			self.package_name,
			static_imports=StaticImportRecord(opts.static_imports),
			skip_namespace=opts.well_known_namespace if opts.skip_well_known_namespace_imports else None,
		)
		return render(context, self.package_name, opts.leading_comment, self.type_decl, indent=opts.indent)

	def __str__(self) -> str:
		return self.render()


__all__ = ["WELL_KNOWN_NAMESPACE", "FileOptions", "SourceFile"]
