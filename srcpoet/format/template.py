# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Statement template parsing and argument binding.

Templates are tokenized by a small lark grammar (`template.lark`). Parsing
depends only on the template string and is memoized; binding pairs each
placeholder with its argument and checks the argument's kind.

Positional rules:
- an unindexed placeholder takes the argument under a shared cursor, and the
  cursor advances once per unindexed placeholder whatever its kind;
- an indexed placeholder (`%2T`) takes that 1-based argument and leaves the
  cursor alone, so one argument can be reused;
- every argument must be consumed at least once.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple, Union

from lark import Lark, Token
from lark.exceptions import UnexpectedInput

from ..core.errors import (
	ArgumentMismatchError,
	FormatSyntaxError,
	IndexOutOfRangeError,
	UnusedArgumentError,
)
from ..core.type_name import TypeName
from ..model import FunctionDecl, Parameter, PropertyDecl, Statement, TypeDecl
from .tokens import DEDENT, INDENT, Marker, Part, ReferenceToken, TokenKind

_GRAMMAR_PATH = Path(__file__).with_name("template.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start="start",
	maybe_placeholders=False,
)

_NAMED_DECLS = (Parameter, PropertyDecl, FunctionDecl, TypeDecl)


@dataclass(frozen=True)
class Placeholder:
	kind: TokenKind
	index: Optional[int]  # 1-based; None means "next under the cursor"


TemplatePart = Union[str, Placeholder, Marker]


def _placeholder(tok: Token) -> Placeholder:
	text = tok.value
	digits = text[1:-1]
	return Placeholder(TokenKind(text[-1]), int(digits) if digits else None)


@lru_cache(maxsize=1024)
def parse_template(template: str) -> Tuple[TemplatePart, ...]:
	"""Split `template` into text, placeholders and indent markers."""
	try:
		tree = _PARSER.parse(template)
	except UnexpectedInput as exc:
		column = getattr(exc, "column", "?")
		raise FormatSyntaxError(f"dangling or unknown format character at column {column}", template=template) from exc

	parts: list[TemplatePart] = []
	for tok in tree.children:
		if tok.type == "TEXT":
			parts.append(str(tok.value))
		elif tok.type == "ESCAPE":
			parts.append("%")
		elif tok.type == "INDENT":
			parts.append(INDENT)
		elif tok.type == "DEDENT":
			parts.append(DEDENT)
		else:
			parts.append(_placeholder(tok))
	return tuple(parts)


def _check_kind(kind: TokenKind, arg: Any, position: int, template: str) -> Any:
	"""Validate `arg` for a placeholder of `kind`; return the token value."""

	def mismatch(expected: str) -> ArgumentMismatchError:
		return ArgumentMismatchError(
			f"%{kind.value} at argument {position + 1} expected {expected}, got {type(arg).__name__}",
			template=template,
		)

	if kind is TokenKind.TYPE:
		if not isinstance(arg, TypeName):
			raise mismatch("a TypeName")
		return arg
	if kind is TokenKind.STRING:
		if arg is not None and not isinstance(arg, str):
			raise mismatch("a string or None")
		return arg
	if kind is TokenKind.NAME:
		if isinstance(arg, str):
			return arg
		if isinstance(arg, _NAMED_DECLS):
			return arg.name
		raise mismatch("a name or a named declaration")
	# Literals take anything except a type, which would silently skip its import.
	if isinstance(arg, TypeName):
		raise mismatch("a literal (use %T for types)")
	return arg


def bind_arguments(template: str, args: Sequence[Any]) -> Tuple[Part, ...]:
	"""Pair every placeholder in `template` with its argument."""
	used = [False] * len(args)
	cursor = 0
	bound: list[Part] = []
	for part in parse_template(template):
		if not isinstance(part, Placeholder):
			bound.append(part)
			continue
		if part.index is None:
			position = cursor
			cursor += 1
			if position >= len(args):
				raise IndexOutOfRangeError(
					f"%{part.kind.value} needs argument {position + 1} but only {len(args)} given",
					template=template,
				)
		else:
			position = part.index - 1
			if not 0 <= position < len(args):
				raise IndexOutOfRangeError(
					f"index {part.index} out of range for {len(args)} argument(s)",
					template=template,
				)
		value = _check_kind(part.kind, args[position], position, template)
		used[position] = True
		bound.append(ReferenceToken(part.kind, value))

	unused = [str(i + 1) for i, flag in enumerate(used) if not flag]
	if unused:
		raise UnusedArgumentError(f"unused argument(s) {', '.join(unused)}", template=template)
	return tuple(bound)


def bind_statement(statement: Statement) -> Tuple[Part, ...]:
	return bind_arguments(statement.template, statement.args)


__all__ = ["Placeholder", "TemplatePart", "parse_template", "bind_arguments", "bind_statement"]
