"""
srcpoet.format: statement templates and the reference tokens they produce.

Modules:
  - template: lark-based template parsing and argument binding
  - tokens: reference token kinds and literal/string rendering
"""

__all__ = [
    "template",
    "tokens",
]
