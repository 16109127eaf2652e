# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Declaration model handed to the emitter.

Everything here is plain immutable data. Collections are stored as tuples; the
constructors accept any iterable and normalize it. Nothing in this module knows
about imports or scopes: that is decided when a `SourceFile` is rendered.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional, Tuple, Union

from .core.type_name import TypeName, is_identifier


def _freeze(obj: Any, name: str, value: Iterable[Any]) -> None:
	object.__setattr__(obj, name, tuple(value))


@dataclass(frozen=True, eq=False)
class Statement:
	"""
	One template plus its arguments.

	Identity matters: the emitter caches the reference tokens it builds for a
	statement by object identity, so two equal-looking statements are still two
	statements.
	"""

	template: str
	args: Tuple[Any, ...] = ()

	def __post_init__(self) -> None:
		_freeze(self, "args", self.args)


@dataclass(frozen=True)
class CodeBlock:
	"""
	Ordered statements of a member body (or an inline code fragment).

	Blocks are immutable; every helper returns a new block:

	    body = CodeBlock().add_statement("%T.gc()", system)
	"""

	statements: Tuple[Statement, ...] = ()

	def __post_init__(self) -> None:
		_freeze(self, "statements", self.statements)

	@classmethod
	def of(cls, template: str, *args: Any) -> "CodeBlock":
		return cls((Statement(template, args),))

	def add(self, template: str, *args: Any) -> "CodeBlock":
		"""Append raw code; newlines are the caller's business."""
		return CodeBlock((*self.statements, Statement(template, args)))

	def add_statement(self, template: str, *args: Any) -> "CodeBlock":
		return self.add(template + "\n", *args)

	def begin_control_flow(self, template: str, *args: Any) -> "CodeBlock":
		return self.add(template + " {\n%>", *args)

	def next_control_flow(self, template: str, *args: Any) -> "CodeBlock":
		return self.add("%<} " + template + " {\n%>", *args)

	def end_control_flow(self) -> "CodeBlock":
		return self.add("%<}\n")

	def is_empty(self) -> bool:
		return not self.statements


class Modifier(Enum):
	"""Declaration modifiers; printed in this order whatever the insertion order."""

	PUBLIC = "public"
	PROTECTED = "protected"
	PRIVATE = "private"
	ABSTRACT = "abstract"
	STATIC = "static"
	FINAL = "final"
	OPEN = "open"
	OVERRIDE = "override"
	INTERNAL = "internal"
	DATA = "data"


def ordered_modifiers(modifiers: Iterable[Modifier]) -> Tuple[Modifier, ...]:
	order = list(Modifier)
	return tuple(sorted(set(modifiers), key=order.index))


class TypeKind(Enum):
	CLASS = "class"
	INTERFACE = "interface"

	@property
	def keyword(self) -> str:
		return self.value


@dataclass(frozen=True)
class AnnotationSpec:
	"""An annotation: its type plus ordered `(member name, value)` pairs."""

	type: TypeName
	members: Tuple[Tuple[str, CodeBlock], ...] = ()

	def __post_init__(self) -> None:
		_freeze(self, "members", self.members)
		for name, value in self.members:
			if not is_identifier(name):
				raise ValueError(f"invalid annotation member name {name!r}")
			if not isinstance(value, CodeBlock):
				raise ValueError(f"annotation member {name!r} must be a CodeBlock")

	def with_member(self, name: str, template: str, *args: Any) -> "AnnotationSpec":
		return AnnotationSpec(self.type, (*self.members, (name, CodeBlock.of(template, *args))))


def _check_name(name: str, what: str) -> None:
	if not is_identifier(name):
		raise ValueError(f"invalid {what} name {name!r}")


@dataclass(frozen=True)
class Parameter:
	name: str
	type: TypeName
	vararg: bool = False
	annotations: Tuple[AnnotationSpec, ...] = ()

	def __post_init__(self) -> None:
		_check_name(self.name, "parameter")
		_freeze(self, "annotations", self.annotations)


@dataclass(frozen=True)
class PropertyDecl:
	name: str
	type: TypeName
	modifiers: Tuple[Modifier, ...] = ()
	annotations: Tuple[AnnotationSpec, ...] = ()
	initializer: Optional[CodeBlock] = None

	def __post_init__(self) -> None:
		_check_name(self.name, "property")
		object.__setattr__(self, "modifiers", ordered_modifiers(self.modifiers))
		_freeze(self, "annotations", self.annotations)


@dataclass(frozen=True)
class FunctionDecl:
	"""A function or constructor. `return_type=None` means nothing is declared."""

	name: str
	parameters: Tuple[Parameter, ...] = ()
	return_type: Optional[TypeName] = None
	modifiers: Tuple[Modifier, ...] = ()
	annotations: Tuple[AnnotationSpec, ...] = ()
	body: CodeBlock = field(default_factory=CodeBlock)
	is_constructor: bool = False

	def __post_init__(self) -> None:
		_check_name(self.name, "function")
		_freeze(self, "parameters", self.parameters)
		object.__setattr__(self, "modifiers", ordered_modifiers(self.modifiers))
		_freeze(self, "annotations", self.annotations)
		if self.is_constructor and self.return_type is not None:
			raise ValueError("constructors have no return type")
		if self.is_abstract and not self.body.is_empty():
			raise ValueError(f"abstract function {self.name!r} cannot have a body")
		for param in self.parameters[:-1]:
			if param.vararg:
				raise ValueError(f"vararg parameter {param.name!r} must be last")

	@classmethod
	def constructor(cls, **kwargs: Any) -> "FunctionDecl":
		return cls(name="constructor", is_constructor=True, **kwargs)

	@property
	def is_abstract(self) -> bool:
		return Modifier.ABSTRACT in self.modifiers


@dataclass(frozen=True)
class InitializerBlock:
	body: CodeBlock = field(default_factory=CodeBlock)
	static: bool = True


Member = Union[PropertyDecl, FunctionDecl, InitializerBlock]


@dataclass(frozen=True)
class TypeDecl:
	"""
	A class or interface declaration.

	`members` print in insertion order, followed by the nested `types`.
	"""

	name: str
	kind: TypeKind = TypeKind.CLASS
	modifiers: Tuple[Modifier, ...] = ()
	annotations: Tuple[AnnotationSpec, ...] = ()
	superclass: Optional[TypeName] = None
	superinterfaces: Tuple[TypeName, ...] = ()
	members: Tuple[Member, ...] = ()
	types: Tuple["TypeDecl", ...] = ()

	def __post_init__(self) -> None:
		_check_name(self.name, "type")
		object.__setattr__(self, "modifiers", ordered_modifiers(self.modifiers))
		_freeze(self, "annotations", self.annotations)
		_freeze(self, "superinterfaces", self.superinterfaces)
		_freeze(self, "members", self.members)
		_freeze(self, "types", self.types)
		if self.kind is TypeKind.INTERFACE and self.superclass is not None:
			raise ValueError(f"interface {self.name!r} cannot have a superclass")
		seen: set[str] = set()
		for child in self.types:
			if child.name in seen:
				raise ValueError(f"duplicate nested type {child.name!r} in {self.name!r}")
			seen.add(child.name)

	@classmethod
	def class_(cls, name: str, **kwargs: Any) -> "TypeDecl":
		return cls(name=name, kind=TypeKind.CLASS, **kwargs)

	@classmethod
	def interface(cls, name: str, **kwargs: Any) -> "TypeDecl":
		return cls(name=name, kind=TypeKind.INTERFACE, **kwargs)

	def nested_type(self, name: str) -> Optional["TypeDecl"]:
		for child in self.types:
			if child.name == name:
				return child
		return None


__all__ = [
	"Statement",
	"CodeBlock",
	"Modifier",
	"ordered_modifiers",
	"TypeKind",
	"AnnotationSpec",
	"Parameter",
	"PropertyDecl",
	"FunctionDecl",
	"InitializerBlock",
	"Member",
	"TypeDecl",
]
