# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from srcpoet import (
	CodeBlock,
	FileOptions,
	FunctionDecl,
	InitializerBlock,
	Modifier,
	Parameter,
	SourceFile,
	TypeDecl,
	TypeName,
)

SYSTEM = TypeName.get("java.lang", "System")
TIME_UNIT = TypeName.get("java.util.concurrent", "TimeUnit")
LONG = TypeName.get("kotlin", "Long")
THREAD_STATE = TypeName.get("java.lang", "Thread", "State")
RUNTIME = TypeName.get("java.lang", "Runtime")


def _util() -> TypeDecl:
	fn = FunctionDecl(
		"minutesToSeconds",
		modifiers=(Modifier.PUBLIC, Modifier.STATIC),
		return_type=LONG,
		parameters=(Parameter("minutes", LONG),),
		body=CodeBlock()
		.add_statement("%T.gc()", SYSTEM)
		.add_statement("return %1T.SECONDS.convert(minutes, %1T.MINUTES)", TIME_UNIT),
	)
	return TypeDecl.class_("Util", members=(fn,))


def _readme(*static_imports) -> str:
	return SourceFile.construct("readme", _util(), FileOptions(static_imports=static_imports)).render()


def test_static_import_none() -> None:
	assert _readme() == """\
package readme

import java.lang.System
import java.util.concurrent.TimeUnit
import kotlin.Long

class Util {
  public static fun minutesToSeconds(minutes: Long): Long {
    System.gc()
    return TimeUnit.SECONDS.convert(minutes, TimeUnit.MINUTES)
  }
}
"""


def test_static_import_once() -> None:
	assert _readme((TIME_UNIT, "SECONDS")) == """\
package readme

import static java.util.concurrent.TimeUnit.SECONDS

import java.lang.System
import java.util.concurrent.TimeUnit
import kotlin.Long

class Util {
  public static fun minutesToSeconds(minutes: Long): Long {
    System.gc()
    return SECONDS.convert(minutes, TimeUnit.MINUTES)
  }
}
"""


def test_static_import_twice_sorted_and_deduplicated() -> None:
	rendered = _readme((TIME_UNIT, "SECONDS"), (TIME_UNIT, "MINUTES"), (TIME_UNIT, "SECONDS"))
	assert rendered == """\
package readme

import static java.util.concurrent.TimeUnit.MINUTES
import static java.util.concurrent.TimeUnit.SECONDS

import java.lang.System
import kotlin.Long

class Util {
  public static fun minutesToSeconds(minutes: Long): Long {
    System.gc()
    return SECONDS.convert(minutes, MINUTES)
  }
}
"""


def test_static_import_using_wildcards() -> None:
	assert _readme((TIME_UNIT, "*"), (SYSTEM, "*")) == """\
package readme

import static java.lang.System.*
import static java.util.concurrent.TimeUnit.*

import kotlin.Long

class Util {
  public static fun minutesToSeconds(minutes: Long): Long {
    gc()
    return SECONDS.convert(minutes, MINUTES)
  }
}
"""


def test_wildcard_suppresses_narrower_entries() -> None:
	rendered = _readme((TIME_UNIT, "SECONDS"), (TIME_UNIT, "*"))
	assert rendered.count("import static") == 1
	assert "import static java.util.concurrent.TimeUnit.*\n" in rendered
	assert "return SECONDS.convert(minutes, MINUTES)" in rendered


def test_static_import_readme_example() -> None:
	hoverboard = TypeName.get("com.mattel", "Hoverboard")
	named_boards = hoverboard.nested("Boards")
	list_type = TypeName.get("java.util", "List")
	array_list = TypeName.get("java.util", "ArrayList")
	collections = TypeName.get("java.util", "Collections")
	list_of_hoverboards = list_type.parameterized(hoverboard)
	beyond = FunctionDecl(
		"beyond",
		return_type=list_of_hoverboards,
		body=CodeBlock()
		.add_statement("%T result = new %T<>()", list_of_hoverboards, array_list)
		.add_statement("result.add(%T.createNimbus(2000))", hoverboard)
		.add_statement('result.add(%T.createNimbus("2001"))', hoverboard)
		.add_statement("result.add(%T.createNimbus(%T.THUNDERBOLT))", hoverboard, named_boards)
		.add_statement("%T.sort(result)", collections)
		.add_statement("return result.isEmpty() ? %T.emptyList() : result", collections),
	)
	source = SourceFile.construct("com.example.helloworld", TypeDecl.class_("HelloWorld", members=(beyond,)))
	source = source.with_static_import(hoverboard, "createNimbus")
	source = source.with_static_import(named_boards, "*")
	source = source.with_static_import(collections, "*")
	assert source.render() == """\
package com.example.helloworld

import static com.mattel.Hoverboard.Boards.*
import static com.mattel.Hoverboard.createNimbus
import static java.util.Collections.*

import com.mattel.Hoverboard
import java.util.ArrayList
import java.util.List

class HelloWorld {
  fun beyond(): List<Hoverboard> {
    List<Hoverboard> result = new ArrayList<>()
    result.add(createNimbus(2000))
    result.add(createNimbus("2001"))
    result.add(createNimbus(THUNDERBOLT))
    sort(result)
    return result.isEmpty() ? emptyList() : result
  }
}
"""


def test_static_import_mixed() -> None:
	taco = TypeDecl.class_(
		"Taco",
		members=(
			InitializerBlock(
				CodeBlock()
				.add_statement('assert %1T.valueOf("BLOCKED") == %1T.BLOCKED', THREAD_STATE)
				.add_statement("%T.gc()", SYSTEM)
				.add_statement("%1T.out.println(%1T.nanoTime())", SYSTEM)
			),
			FunctionDecl.constructor(parameters=(Parameter("states", THREAD_STATE, vararg=True),)),
		),
	)
	options = FileOptions(
		static_imports=((THREAD_STATE, "BLOCKED"), (SYSTEM, "*"), (THREAD_STATE, "valueOf")),
	)
	assert SourceFile.construct("com.squareup.tacos", taco, options).render() == """\
package com.squareup.tacos

import static java.lang.System.*
import static java.lang.Thread.State.BLOCKED
import static java.lang.Thread.State.valueOf

import java.lang.Thread

class Taco {
  static {
    assert valueOf("BLOCKED") == BLOCKED
    gc()
    out.println(nanoTime())
  }

  constructor(vararg states: Thread.State) {
  }
}
"""


def test_static_import_for_crazy_formats_works() -> None:
	method = FunctionDecl("method")
	block = (
		CodeBlock()
		.add_statement("%T", RUNTIME)
		.add_statement("%T.a()", RUNTIME)
		.add_statement("%T.X", RUNTIME)
		.add_statement("%T%T", RUNTIME, RUNTIME)
		.add_statement("%T.%T", RUNTIME, RUNTIME)
		.add_statement("%1T%1T", RUNTIME)
		.add_statement("%1T%2L%1T", RUNTIME, "?")
		.add_statement("%1T%2L%2S%1T", RUNTIME, "?")
		.add_statement("%1T%2L%2S%1T%3N%1T", RUNTIME, "?", method)
		.add_statement("%T%L", RUNTIME, "?")
		.add_statement("%T%S", RUNTIME, "?")
		.add_statement("%T%N", RUNTIME, method)
	)
	source = SourceFile.construct(
		"com.squareup.tacos",
		TypeDecl.class_("Taco", members=(InitializerBlock(block),)),
		FileOptions(static_imports=((RUNTIME, "*"),)),
	)
	rendered = source.render()
	assert "    a()\n" in rendered
	assert "    X\n" in rendered
	assert "    Runtime.Runtime\n" in rendered
	assert '    Runtime?"?"RuntimemethodRuntime\n' in rendered
	assert "import java.lang.Runtime\n" in rendered


def test_static_import_of_unused_member_is_still_printed() -> None:
	rendered = _readme((SYSTEM, "exit"))
	assert rendered.startswith("package readme\n\nimport static java.lang.System.exit\n\nimport java.lang.System\n")
	assert "    System.gc()\n" in rendered


def test_invalid_static_import_member_is_rejected() -> None:
	with pytest.raises(ValueError):
		FileOptions(static_imports=((SYSTEM, "not a member"),))
