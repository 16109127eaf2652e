# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Import bookkeeping for one rendering run.

`ImportRecord` maps a simple name to the top-level type that first claimed it.
A claim is insert-if-absent: once `Float` means `com.squareup.soda.Float`, a
later `java.lang.Float` renders fully qualified instead of stealing the name.

`StaticImportRecord` holds the explicitly registered `(type, member)` pairs,
where the member may be `*`.

Both records are created empty per run, filled during the resolve pass and
frozen before printing.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..core.type_name import TypeName, is_identifier

logger = logging.getLogger(__name__)

WILDCARD = "*"


class FrozenRecordError(RuntimeError):
	"""An import record was modified after the resolve pass finished."""


class ImportRecord:
	"""First-claim-wins mapping from simple name to top-level TypeName."""

	def __init__(self) -> None:
		self._bound: Dict[str, TypeName] = {}
		self._frozen = False

	def claim(self, top_level: TypeName) -> TypeName:
		"""
		Bind `top_level.simple_name` to `top_level` unless already bound.

		Returns whatever the name is bound to afterwards; callers compare it with
		`top_level` to decide between a bare and a qualified rendering.
		"""
		name = top_level.simple_name
		bound = self._bound.get(name)
		if bound is not None:
			if bound != top_level:
				logger.debug(f"[imports] {name} already claimed by {bound.canonical_name}; {top_level.canonical_name} stays qualified")
			return bound
		if self._frozen:
			raise FrozenRecordError(f"cannot claim {name!r} after the resolve pass")
		self._bound[name] = top_level
		return top_level

	def bound(self, simple_name: str) -> Optional[TypeName]:
		return self._bound.get(simple_name)

	def freeze(self) -> None:
		self._frozen = True

	def __iter__(self):
		return iter(self._bound.values())

	def __len__(self) -> int:
		return len(self._bound)


class StaticImportRecord:
	"""Registered static imports; a wildcard covers every member of its type."""

	def __init__(self, entries: Iterable[Tuple[TypeName, str]] = ()) -> None:
		self._entries: Set[Tuple[TypeName, str]] = set()
		self._frozen = False
		for type_name, member in entries:
			self.add(type_name, member)

	def add(self, type_name: TypeName, member: str) -> None:
		if self._frozen:
			raise FrozenRecordError("cannot add static imports after the resolve pass")
		if member != WILDCARD and not is_identifier(member):
			raise ValueError(f"invalid static import member {member!r}")
		self._entries.add((type_name.raw(), member))

	def covers(self, type_name: TypeName, member: str) -> bool:
		"""True if `type_name.member` may be written as a bare `member`."""
		return (type_name, member) in self._entries or (type_name, WILDCARD) in self._entries

	def freeze(self) -> None:
		self._frozen = True

	def __len__(self) -> int:
		return len(self._entries)

	def lines(self) -> List[str]:
		"""`import static` targets, sorted, with members under a wildcard dropped."""
		wildcards = {t for t, member in self._entries if member == WILDCARD}
		printed = {
			f"{t.canonical_name}.{member}"
			for t, member in self._entries
			if member == WILDCARD or t not in wildcards
		}
		return sorted(printed)


def plain_import_lines(
	record: ImportRecord,
	package: str,
	*,
	skip_namespace: Optional[str] = None,
) -> List[str]:
	"""
	Import targets for every claimed name that actually needs an import line.

	Dropped: default-package types (nothing to import), types from the file's
	own package, and, when `skip_namespace` is set, types from that namespace.
	The drop happens after claiming, so a skipped type keeps its name and a
	colliding type still renders qualified.
	"""
	lines = []
	for type_name in record:
		if not type_name.package or type_name.package == package:
			continue
		if skip_namespace is not None and type_name.package == skip_namespace:
			continue
		lines.append(type_name.canonical_name)
	return sorted(lines)


def import_block(static_lines: List[str], plain_lines: List[str]) -> str:
	"""Static block, blank line, plain block, blank line; empty blocks vanish."""
	blocks = []
	if static_lines:
		blocks.append("".join(f"import static {line}\n" for line in static_lines))
	if plain_lines:
		blocks.append("".join(f"import {line}\n" for line in plain_lines))
	return "".join(block + "\n" for block in blocks)


__all__ = [
	"WILDCARD",
	"FrozenRecordError",
	"ImportRecord",
	"StaticImportRecord",
	"plain_import_lines",
	"import_block",
]
