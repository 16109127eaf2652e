# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Error taxonomy for source rendering.

Every error here signals a defect in how the declaration model was built. They
are raised while references are being resolved, before any text is produced,
so a render either returns the whole file or raises.
"""

from __future__ import annotations

from typing import Any


class PoetError(Exception):
	"""Root of all rendering errors."""


class TemplateError(PoetError, ValueError):
	"""
	A statement template could not be formatted against its arguments.

	This is a `ValueError` subclass so callers validating user-built models can
	treat it like any other bad-input error, but it keeps the offending template
	around for reporting.
	"""

	def __init__(self, message: str, *, template: str) -> None:
		super().__init__(f"{message} in template {template!r}")
		self.template = template


class FormatSyntaxError(TemplateError):
	"""Malformed placeholder (dangling `%`, unknown kind letter)."""


class ArgumentMismatchError(TemplateError):
	"""Placeholder kind disagrees with the runtime kind of its argument."""


class IndexOutOfRangeError(TemplateError):
	"""Placeholder refers to an argument position that does not exist."""


class UnusedArgumentError(TemplateError):
	"""Arguments were left over after every placeholder was consumed."""


class UnbalancedIndentError(TemplateError):
	"""A member body does not close every `%>` it opens with a matching `%<`."""


class AmbiguousReferenceError(PoetError):
	"""No rendering of `target` is unambiguous from the referencing scope."""

	def __init__(self, message: str, *, target: Any) -> None:
		super().__init__(message)
		self.target = target


__all__ = [
	"PoetError",
	"TemplateError",
	"FormatSyntaxError",
	"ArgumentMismatchError",
	"IndexOutOfRangeError",
	"UnusedArgumentError",
	"UnbalancedIndentError",
	"AmbiguousReferenceError",
]
