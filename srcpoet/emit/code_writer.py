# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Two-pass emitter.

`CodeWriter` walks a source file depth-first, parent before children, and
spells out every header, member and statement. The same walk runs twice:

1. resolve pass: output is discarded; every type reference goes through the
   context, which binds statements, resolves names and records imports;
2. print pass: the context is frozen and answers from its caches; text is
   collected and the import block (now complete) is written up front.

Because both passes run the very same code, the print pass visits references
in exactly the order the resolve pass did.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from ..core.errors import UnbalancedIndentError
from ..core.type_name import TypeName
from ..format.tokens import DEDENT, INDENT, ReferenceToken, TokenKind, literal_text, string_literal
from ..model import (
	AnnotationSpec,
	CodeBlock,
	FunctionDecl,
	InitializerBlock,
	Member,
	Modifier,
	Parameter,
	PropertyDecl,
	TypeDecl,
	TypeKind,
)
from .context import ResolutionContext
from .scope import ScopeFrame, ScopePath

logger = logging.getLogger(__name__)


class CodeWriter:
	"""Indentation-aware text sink driving one pass over a file."""

	def __init__(self, context: ResolutionContext, *, indent: str = "  ", record: bool = True) -> None:
		self._ctx = context
		self._indent = indent
		self._record = record
		self._level = 0
		self._out: List[str] = []
		self._at_line_start = True

	def text(self) -> str:
		return "".join(self._out)

	# --- low-level output -------------------------------------------------

	def _write(self, text: str) -> None:
		if self._record:
			self._out.append(text)

	def emit(self, text: str) -> "CodeWriter":
		"""Append `text`, indenting the start of every non-empty line."""
		for i, line in enumerate(text.split("\n")):
			if i:
				self._write("\n")
				self._at_line_start = True
			if not line:
				continue
			if self._at_line_start:
				self._write(self._indent * self._level)
				self._at_line_start = False
			self._write(line)
		return self

	def indent(self) -> None:
		self._level += 1

	def unindent(self) -> None:
		if self._level == 0:
			raise ValueError("unbalanced unindent")
		self._level -= 1

	def _end_line(self) -> None:
		if not self._at_line_start:
			self.emit("\n")

	# --- file -------------------------------------------------------------

	def emit_file(self, package: str, leading_comment: Optional[str], top_level: TypeDecl) -> None:
		if leading_comment:
			self._emit_comment(leading_comment)
		if package:
			self.emit(f"package {package}\n\n")
		if self._record:
			self.emit(self._ctx.import_block())
		self._emit_type(top_level, TypeName(package, (top_level.name,)), ())

	def _emit_comment(self, comment: str) -> None:
		for line in comment.split("\n"):
			self.emit(f"// {line}\n" if line else "//\n")

	# --- references -------------------------------------------------------

	def _type(self, type_name: TypeName, scope: ScopePath) -> None:
		self.emit(self._ctx.render_type(type_name, type_name, scope))

	def _types(self, type_names: Sequence[TypeName], scope: ScopePath) -> None:
		for i, type_name in enumerate(type_names):
			if i:
				self.emit(", ")
			self._type(type_name, scope)

	def emit_code(self, block: CodeBlock, scope: ScopePath) -> None:
		for statement in block.statements:
			for part in self._ctx.parts_for(statement):
				if isinstance(part, str):
					self.emit(part)
				elif part is INDENT:
					self.indent()
				elif part is DEDENT:
					self.unindent()
				else:
					self._emit_token(part, scope)

	def _emit_token(self, token: ReferenceToken, scope: ScopePath) -> None:
		if token.kind is TokenKind.TYPE:
			self.emit(self._ctx.render_type(token, token.value, scope))
		elif token.kind is TokenKind.STRING:
			self.emit(string_literal(token.value))
		elif token.kind is TokenKind.NAME:
			self.emit(token.value)
		elif isinstance(token.value, CodeBlock):
			self.emit_code(token.value, scope)
		else:
			self.emit(literal_text(token.value))

	# --- declarations -----------------------------------------------------

	def _emit_annotation(self, annotation: AnnotationSpec, scope: ScopePath) -> None:
		self.emit("@")
		self._type(annotation.type, scope)
		members = annotation.members
		if not members:
			return
		self.emit("(")
		if len(members) == 1 and members[0][0] == "value":
			self.emit_code(members[0][1], scope)
		else:
			for i, (name, value) in enumerate(members):
				if i:
					self.emit(", ")
				self.emit(f"{name} = ")
				self.emit_code(value, scope)
		self.emit(")")

	def _emit_annotation_lines(self, annotations: Iterable[AnnotationSpec], scope: ScopePath) -> None:
		for annotation in annotations:
			self._emit_annotation(annotation, scope)
			self.emit("\n")

	def _emit_modifiers(self, modifiers: Iterable[Modifier]) -> None:
		for modifier in modifiers:
			self.emit(f"{modifier.value} ")

	def _emit_type(self, decl: TypeDecl, type_name: TypeName, enclosing: ScopePath) -> None:
		logger.debug(f"[emit] type {type_name.canonical_name}")
		self._emit_annotation_lines(decl.annotations, enclosing)
		self._emit_modifiers(decl.modifiers)
		self.emit(f"{decl.kind.keyword} {decl.name}")

		header = enclosing + (ScopeFrame(decl, type_name, exposes_children=False),)
		if decl.superclass is not None:
			self.emit(" extends ")
			self._type(decl.superclass, header)
		if decl.superinterfaces:
			self.emit(" extends " if decl.kind is TypeKind.INTERFACE else " implements ")
			self._types(decl.superinterfaces, header)
		self.emit(" {\n")

		scope = enclosing + (ScopeFrame(decl, type_name),)
		self.indent()
		first = True
		for member in decl.members:
			if not first:
				self.emit("\n")
			self._emit_member(member, scope)
			first = False
		for child in decl.types:
			if not first:
				self.emit("\n")
			self._emit_type(child, type_name.nested(child.name), scope)
			first = False
		self.unindent()
		self.emit("}\n")

	def _emit_member(self, member: Member, scope: ScopePath) -> None:
		if isinstance(member, PropertyDecl):
			self._emit_property(member, scope)
		elif isinstance(member, FunctionDecl):
			self._emit_function(member, scope)
		elif isinstance(member, InitializerBlock):
			self._emit_initializer(member, scope)
		else:
			raise TypeError(f"unsupported member {type(member).__name__}")

	def _emit_property(self, prop: PropertyDecl, scope: ScopePath) -> None:
		self._emit_annotation_lines(prop.annotations, scope)
		self._emit_modifiers(prop.modifiers)
		self.emit(f"{prop.name}: ")
		self._type(prop.type, scope)
		if prop.initializer is not None:
			self.emit(" = ")
			self.emit_code(prop.initializer, scope)
		self.emit(";\n")

	def _emit_parameter(self, param: Parameter, scope: ScopePath) -> None:
		for annotation in param.annotations:
			self._emit_annotation(annotation, scope)
			self.emit(" ")
		if param.vararg:
			self.emit("vararg ")
		self.emit(f"{param.name}: ")
		self._type(param.type, scope)

	def _emit_function(self, fn: FunctionDecl, scope: ScopePath) -> None:
		self._emit_annotation_lines(fn.annotations, scope)
		self._emit_modifiers(fn.modifiers)
		self.emit("constructor(" if fn.is_constructor else f"fun {fn.name}(")
		for i, param in enumerate(fn.parameters):
			if i:
				self.emit(", ")
			self._emit_parameter(param, scope)
		self.emit(")")
		if fn.return_type is not None:
			self.emit(": ")
			self._type(fn.return_type, scope)
		if fn.is_abstract:
			self.emit("\n")
			return
		self._emit_body(fn.body, scope)

	def _emit_initializer(self, block: InitializerBlock, scope: ScopePath) -> None:
		self.emit("static" if block.static else "init")
		self._emit_body(block.body, scope)

	def _emit_body(self, body: CodeBlock, scope: ScopePath) -> None:
		self.emit(" {\n")
		self.indent()
		level = self._level
		self.emit_code(body, scope)
		if self._level != level:
			raise UnbalancedIndentError(
				f"body ends {self._level - level:+d} indentation levels from where it started",
				template="".join(s.template for s in body.statements),
			)
		self._end_line()
		self.unindent()
		self.emit("}\n")


def render(
	context: ResolutionContext,
	package: str,
	leading_comment: Optional[str],
	top_level: TypeDecl,
	*,
	indent: str = "  ",
) -> str:
	"""Run both passes over one file and return its text."""
	CodeWriter(context, indent=indent, record=False).emit_file(package, leading_comment, top_level)
	context.freeze()
	writer = CodeWriter(context, indent=indent)
	writer.emit_file(package, leading_comment, top_level)
	return writer.text()


__all__ = ["CodeWriter", "render"]
