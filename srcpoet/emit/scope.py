# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Scope resolution: how should a type be spelled at this point of the file?

The answer depends on two things only: the target `TypeName` and the explicit
scope path (the chain of declarations enclosing the reference). The resolver
tries, from the innermost type of the target outward, to find the shortest
trailing part of the target's name chain whose head resolves to the right type
from the current scope:

    scope A > B > C, target A.Twin.D
      "D"    -> nothing visible named D
      "Twin" -> B.Twin is visible from C and is not A.Twin, keep going
      "A"    -> the top-level A, which is the target's head: print "A.Twin.D"

If even the top-level name is shadowed by a nested declaration, the type is
printed fully qualified. Otherwise the top-level name is claimed in the import
record; whichever type claimed it first wins and everyone else qualifies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.errors import AmbiguousReferenceError
from ..core.type_name import TypeName
from ..model import TypeDecl
from .imports import ImportRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ScopeFrame:
	"""
	One enclosing declaration on the scope path.

	While a declaration's own header is resolved its frame hides the nested
	types (`exposes_children=False`): `class Builder extends Message.Builder`
	must not see a `Builder` declared inside itself.
	"""

	decl: TypeDecl
	type_name: TypeName
	exposes_children: bool = True

	def key(self) -> Tuple[TypeName, bool]:
		return (self.type_name, self.exposes_children)


ScopePath = Tuple[ScopeFrame, ...]


def scope_key(scope: ScopePath) -> Tuple[Tuple[TypeName, bool], ...]:
	return tuple(frame.key() for frame in scope)


def lookup(simple_name: str, scope: ScopePath) -> Optional[TypeName]:
	"""The declared type `simple_name` refers to from `scope`, if any."""
	for frame in reversed(scope):
		if not frame.exposes_children:
			continue
		if frame.decl.nested_type(simple_name) is not None:
			return frame.type_name.nested(simple_name)
	if scope and scope[0].decl.name == simple_name:
		return scope[0].type_name
	return None


class ScopeResolver:
	"""Renders TypeNames for one file, recording import claims as it goes."""

	def __init__(self, imports: ImportRecord) -> None:
		self._imports = imports

	def resolve(self, target: TypeName, scope: ScopePath) -> str:
		"""Shortest legal spelling of `target` (type arguments included) from `scope`."""
		text = self._resolve_raw(target.raw(), scope)
		if target.type_arguments:
			args = ", ".join(self.resolve(arg, scope) for arg in target.type_arguments)
			text = f"{text}<{args}>"
		return text

	def _resolve_raw(self, target: TypeName, scope: ScopePath) -> str:
		names = target.simple_names
		shadow: Optional[TypeName] = None
		for depth in range(len(names), 0, -1):
			found = lookup(names[depth - 1], scope)
			if found is None:
				continue
			if found == TypeName(target.package, names[:depth]):
				return ".".join(names[depth - 1:])
			if depth == 1:
				shadow = found

		if shadow is not None:
			if not target.package:
				raise AmbiguousReferenceError(
					f"{target.canonical_name} is in the default package and {names[0]} names {shadow.canonical_name} in this scope",
					target=target,
				)
			logger.debug(f"[scope] {names[0]} is shadowed by {shadow.canonical_name}; qualifying {target.canonical_name}")
			return self._qualified(target, scope)

		# Default-package types cannot be imported and take no part in import binding.
		if not target.package:
			return ".".join(names)

		bound = self._imports.claim(target.top_level())
		if bound == target.top_level():
			return ".".join(names)
		return self._qualified(target, scope)

	def _qualified(self, target: TypeName, scope: ScopePath) -> str:
		head = target.package.split(".", 1)[0]
		obscuring = lookup(head, scope)
		if obscuring is not None:
			raise AmbiguousReferenceError(
				f"{target.canonical_name} cannot be qualified: {head!r} names {obscuring.canonical_name} in this scope",
				target=target,
			)
		return target.canonical_name


__all__ = ["ScopeFrame", "ScopePath", "scope_key", "lookup", "ScopeResolver"]
