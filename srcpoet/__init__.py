# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
srcpoet: build declaration trees in memory and render them to source text.

Imports and the shortest unambiguous spelling of every referenced type are
computed while rendering:

    from srcpoet import CodeBlock, FunctionDecl, SourceFile, TypeDecl, TypeName

    system = TypeName.get("java.lang", "System")
    hello = TypeDecl.class_("Hello", members=(
        FunctionDecl("main", body=CodeBlock().add_statement("%T.gc()", system)),
    ))
    print(SourceFile.construct("com.example", hello).render())
"""

from .core.errors import (
	AmbiguousReferenceError,
	ArgumentMismatchError,
	FormatSyntaxError,
	IndexOutOfRangeError,
	PoetError,
	TemplateError,
	UnbalancedIndentError,
	UnusedArgumentError,
)
from .core.type_name import TypeName
from .model import (
	AnnotationSpec,
	CodeBlock,
	FunctionDecl,
	InitializerBlock,
	Modifier,
	Parameter,
	PropertyDecl,
	Statement,
	TypeDecl,
	TypeKind,
)
from .source_file import WELL_KNOWN_NAMESPACE, FileOptions, SourceFile

__all__ = [
	"AmbiguousReferenceError",
	"ArgumentMismatchError",
	"FormatSyntaxError",
	"IndexOutOfRangeError",
	"PoetError",
	"TemplateError",
	"UnbalancedIndentError",
	"UnusedArgumentError",
	"TypeName",
	"AnnotationSpec",
	"CodeBlock",
	"FunctionDecl",
	"InitializerBlock",
	"Modifier",
	"Parameter",
	"PropertyDecl",
	"Statement",
	"TypeDecl",
	"TypeKind",
	"WELL_KNOWN_NAMESPACE",
	"FileOptions",
	"SourceFile",
]
