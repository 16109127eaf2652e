"""
srcpoet.core: value types shared by the model, the formatter and the emitter.

Modules:
  - type_name: TypeName identities
  - errors: rendering error taxonomy
"""

__all__ = [
    "type_name",
    "errors",
]
