"""
srcpoet.emit: reference resolution and the two-pass emitter.

Modules:
  - scope: scope paths and the Scope Resolver
  - imports: import records and import block assembly
  - context: per-run resolution context shared by both passes
  - code_writer: the emitter
"""

__all__ = [
    "scope",
    "imports",
    "context",
    "code_writer",
]
