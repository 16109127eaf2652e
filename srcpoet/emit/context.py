# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Per-run resolution state shared by the two emitter passes.

A `ResolutionContext` is built for exactly one `SourceFile.render()` call and
dropped afterwards. During the resolve pass it binds statements to reference
tokens, resolves type references and records import claims; after `freeze()`
it only answers from its caches, so the printing pass sees exactly the
renderings the resolve pass decided on.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Hashable, List, Optional, Tuple

from ..core.type_name import TypeName
from ..format.template import bind_statement
from ..format.tokens import Part, ReferenceToken, TokenKind
from ..model import Statement
from .imports import ImportRecord, StaticImportRecord, import_block, plain_import_lines
from .scope import ScopePath, ScopeResolver, scope_key

logger = logging.getLogger(__name__)

_MEMBER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


class ResolutionContext:
	"""Import records plus the token and rendering caches of one run."""

	def __init__(
		self,
		package: str,
		*,
		static_imports: StaticImportRecord,
		skip_namespace: Optional[str] = None,
	) -> None:
		self.package = package
		self.imports = ImportRecord()
		self.static_imports = static_imports
		self.skip_namespace = skip_namespace
		self._resolver = ScopeResolver(self.imports)
		# id(statement) -> (statement, parts); the statement is kept to pin its id.
		self._parts: Dict[int, Tuple[Statement, Tuple[Part, ...]]] = {}
		# (reference identity, scope key) -> (reference, rendering)
		self._renderings: Dict[Tuple[int, Hashable], Tuple[Any, str]] = {}
		self._frozen = False

	def freeze(self) -> None:
		self._frozen = True
		self.imports.freeze()
		self.static_imports.freeze()
		logger.debug(
			f"[emit] resolved {len(self._renderings)} reference(s); "
			f"{len(self.imports)} name(s) claimed, {len(self.static_imports)} static import(s)"
		)

	def parts_for(self, statement: Statement) -> Tuple[Part, ...]:
		"""Bound parts of `statement`, with static-import member elision applied."""
		cached = self._parts.get(id(statement))
		if cached is not None:
			return cached[1]
		if self._frozen:
			raise RuntimeError(f"statement {statement.template!r} was not seen by the resolve pass")
		parts = self._elide_static_members(bind_statement(statement))
		self._parts[id(statement)] = (statement, parts)
		return parts

	def _elide_static_members(self, parts: Tuple[Part, ...]) -> Tuple[Part, ...]:
		"""Turn `%T.member` into `member` when a static import covers it."""
		if not len(self.static_imports):
			return parts
		out: List[Part] = []
		i = 0
		while i < len(parts):
			part = parts[i]
			following = parts[i + 1] if i + 1 < len(parts) else None
			if (
				isinstance(part, ReferenceToken)
				and part.kind is TokenKind.TYPE
				and not part.value.type_arguments
				and isinstance(following, str)
				and following.startswith(".")
			):
				match = _MEMBER_RE.match(following, 1)
				if match and self.static_imports.covers(part.value, match.group()):
					logger.debug(f"[emit] static import covers {part.value.canonical_name}.{match.group()}")
					out.append(following[1:])
					i += 2
					continue
			out.append(part)
			i += 1
		return tuple(out)

	def render_type(self, reference: Any, type_name: TypeName, scope: ScopePath) -> str:
		"""
		Rendering of `type_name` at `reference` from `scope`.

		`reference` is the object that carries the type in the model (a token, or
		the TypeName itself for declaration headers); it keys the cache together
		with the scope so reused model objects stay correct in every scope.
		"""
		key = (id(reference), scope_key(scope))
		cached = self._renderings.get(key)
		if cached is not None:
			return cached[1]
		if self._frozen:
			raise RuntimeError(f"{type_name} was not resolved by the resolve pass")
		text = self._resolver.resolve(type_name, scope)
		self._renderings[key] = (reference, text)
		return text

	def import_block(self) -> str:
		return import_block(
			self.static_imports.lines(),
			plain_import_lines(self.imports, self.package, skip_namespace=self.skip_namespace),
		)


__all__ = ["ResolutionContext"]
