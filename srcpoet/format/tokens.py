# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Reference tokens: what a bound placeholder turns into.

A bound statement is a tuple of parts, each one of:
- `str`: literal template text, printed verbatim,
- `ReferenceToken`: a bound placeholder,
- `INDENT` / `DEDENT`: indentation markers.

Tokens compare by identity. The emitter keys its resolution cache on the token
object, so the same `%T` occurrence always maps to the same rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class TokenKind(Enum):
	TYPE = "T"
	LITERAL = "L"
	STRING = "S"
	NAME = "N"


@dataclass(frozen=True, eq=False)
class ReferenceToken:
	kind: TokenKind
	value: Any


class Marker:
	def __init__(self, name: str) -> None:
		self._name = name

	def __repr__(self) -> str:
		return self._name


INDENT = Marker("INDENT")
DEDENT = Marker("DEDENT")

Part = Union[str, ReferenceToken, Marker]

_ESCAPES = {
	'"': '\\"',
	"\\": "\\\\",
	"\n": "\\n",
	"\t": "\\t",
	"\r": "\\r",
	"\b": "\\b",
	"\f": "\\f",
}


def string_literal(value: str | None) -> str:
	"""Quote and escape `value`; None prints as `null`."""
	if value is None:
		return "null"
	out = ['"']
	for ch in value:
		escaped = _ESCAPES.get(ch)
		if escaped is not None:
			out.append(escaped)
		elif ord(ch) < 0x20 or 0x7F <= ord(ch) < 0xA0:
			out.append(f"\\u{ord(ch):04x}")
		else:
			out.append(ch)
	out.append('"')
	return "".join(out)


def literal_text(value: Any) -> str:
	"""Verbatim text for a `%L` argument that is not a code block."""
	if value is None:
		return "null"
	if isinstance(value, bool):
		return "true" if value else "false"
	return str(value)


__all__ = ["TokenKind", "ReferenceToken", "INDENT", "DEDENT", "Part", "string_literal", "literal_text"]
