# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from srcpoet.core.errors import (
	ArgumentMismatchError,
	FormatSyntaxError,
	IndexOutOfRangeError,
	UnusedArgumentError,
)
from srcpoet.core.type_name import TypeName
from srcpoet.format.template import Placeholder, bind_arguments, parse_template
from srcpoet.format.tokens import DEDENT, INDENT, ReferenceToken, TokenKind
from srcpoet.model import CodeBlock, FunctionDecl, Parameter

A = TypeName.get("com.example", "A")
B = TypeName.get("com.example", "B")


def _values(parts) -> list:
	return [(p.kind, p.value) for p in parts if isinstance(p, ReferenceToken)]


def test_parse_splits_text_placeholders_and_markers() -> None:
	parts = parse_template("if (%1T.ok(%S)) {\n%>100%%%<")
	assert parts == (
		"if (",
		Placeholder(TokenKind.TYPE, 1),
		".ok(",
		Placeholder(TokenKind.STRING, None),
		")) {\n",
		INDENT,
		"100",
		"%",
		DEDENT,
	)


def test_parse_empty_template() -> None:
	assert parse_template("") == ()


def test_cursor_advances_per_unindexed_placeholder_only() -> None:
	parts = bind_arguments("%T %1T %L %2L", [A, "x"])
	assert _values(parts) == [
		(TokenKind.TYPE, A),
		(TokenKind.TYPE, A),
		(TokenKind.LITERAL, "x"),
		(TokenKind.LITERAL, "x"),
	]


def test_cursor_is_shared_across_kinds() -> None:
	parts = bind_arguments("%T.%N(%S)", [A, "call", "arg"])
	assert _values(parts) == [
		(TokenKind.TYPE, A),
		(TokenKind.NAME, "call"),
		(TokenKind.STRING, "arg"),
	]


def test_indexed_reuse_consumes_every_argument() -> None:
	parts = bind_arguments("%1T%2L%1T%3N%2S", [A, "?", FunctionDecl("method")])
	assert _values(parts) == [
		(TokenKind.TYPE, A),
		(TokenKind.LITERAL, "?"),
		(TokenKind.TYPE, A),
		(TokenKind.NAME, "method"),
		(TokenKind.STRING, "?"),
	]


def test_each_placeholder_gets_its_own_token() -> None:
	first, second = [p for p in bind_arguments("%1T%1T", [A]) if isinstance(p, ReferenceToken)]
	assert first is not second
	assert first != second


def test_name_accepts_named_declarations() -> None:
	parts = bind_arguments("%N", [Parameter("minutes", B)])
	assert _values(parts) == [(TokenKind.NAME, "minutes")]


def test_literal_accepts_code_blocks_and_none() -> None:
	block = CodeBlock.of("x")
	assert _values(bind_arguments("%L %L", [block, None])) == [(TokenKind.LITERAL, block), (TokenKind.LITERAL, None)]


@pytest.mark.parametrize(
	"template, args",
	[
		("%T", ["com.example.A"]),
		("%S", [1]),
		("%N", [3.5]),
		("%L", [A]),
	],
)
def test_kind_mismatch(template: str, args: list) -> None:
	with pytest.raises(ArgumentMismatchError):
		bind_arguments(template, args)


@pytest.mark.parametrize("template", ["%3T", "%0T", "%T%T"])
def test_index_out_of_range(template: str) -> None:
	with pytest.raises(IndexOutOfRangeError):
		bind_arguments(template, [A, B] if template == "%3T" else [A])


def test_unused_arguments() -> None:
	with pytest.raises(UnusedArgumentError) as excinfo:
		bind_arguments("%2T", [A, B])
	assert "1" in str(excinfo.value)


@pytest.mark.parametrize("template", ["50%", "%X", "%1", "% T"])
def test_syntax_errors(template: str) -> None:
	with pytest.raises(FormatSyntaxError):
		parse_template(template)
