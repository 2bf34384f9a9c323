"""
JSON Schema контракты векторов и матриц

Схемы строятся в коде (Draft 2020-12) из element_schema домена, без чтения
файлов. Payload допускает разреженные entries: отсутствующие позиции
заполняются builder'ом при декодировании.

Формат vector payload:
    {"domain": "long", "size": 3, "entries": [{"index": 1, "element": 7}]}

Формат matrix payload:
    {"domain": "long", "rows": 2, "columns": 2,
     "entries": [{"row": 1, "column": 1, "element": 7}]}
"""

from typing import Any, Dict, Final

from src.linear.field import QuotientField

SCHEMA_DIALECT: Final[str] = "https://json-schema.org/draft/2020-12/schema"

_POSITIVE_INT: Final[Dict[str, Any]] = {"type": "integer", "minimum": 1}


def vector_schema(field: QuotientField) -> Dict[str, Any]:
    """
    Схема vector payload для домена field.

    Args:
        field: QuotientField домена (задаёт тег и схему элемента)

    Returns:
        JSON Schema как dict
    """
    return {
        "$schema": SCHEMA_DIALECT,
        "title": f"{field.name}_vector",
        "type": "object",
        "required": ["domain", "size", "entries"],
        "properties": {
            "domain": {"const": field.name},
            "size": _POSITIVE_INT,
            "entries": {
                "type": "array",
                "minItems": 1,
                "items": {
                    "type": "object",
                    "required": ["index", "element"],
                    "properties": {
                        "index": _POSITIVE_INT,
                        "element": field.element_schema,
                    },
                    "additionalProperties": False,
                },
            },
        },
        "additionalProperties": False,
    }


def matrix_schema(field: QuotientField) -> Dict[str, Any]:
    """
    Схема matrix payload для домена field.

    Args:
        field: QuotientField домена

    Returns:
        JSON Schema как dict
    """
    return {
        "$schema": SCHEMA_DIALECT,
        "title": f"{field.name}_matrix",
        "type": "object",
        "required": ["domain", "rows", "columns", "entries"],
        "properties": {
            "domain": {"const": field.name},
            "rows": _POSITIVE_INT,
            "columns": _POSITIVE_INT,
            "entries": {
                "type": "array",
                "minItems": 1,
                "items": {
                    "type": "object",
                    "required": ["row", "column", "element"],
                    "properties": {
                        "row": _POSITIVE_INT,
                        "column": _POSITIVE_INT,
                        "element": field.element_schema,
                    },
                    "additionalProperties": False,
                },
            },
        },
        "additionalProperties": False,
    }
