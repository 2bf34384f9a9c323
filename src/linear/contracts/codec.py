"""
Payload codec — Сериализация векторов и матриц в JSON-совместимые dict

Декодирование всегда проходит через builder домена: payload валидируется
по JSON Schema, элементы добавляются через put(), пропуски заполняются
computation_of_absent (нулём домена), а build() проверяет индексы.

Кодирование с sparse=True опускает элементы, структурно равные нулю домена
(-0.0 и Decimal("0.00") сохраняются). Если нулевые все элементы, сохраняется
первый: пустой payload запрещён.
"""

from typing import Any, Dict

from src.linear.builder import AbstractMatrixBuilder, AbstractVectorBuilder
from src.linear.contracts.validators import (
    validate_matrix_payload,
    validate_vector_payload,
)
from src.linear.matrix import AbstractMatrix
from src.linear.vector import AbstractVector


def _is_structural_zero(field, element) -> bool:
    return field.structural_key(element) == field.structural_key(field.zero)


# =============================================================================
# VECTOR
# =============================================================================


def vector_to_payload(vector: AbstractVector, sparse: bool = False) -> Dict[str, Any]:
    """
    Кодирование вектора в payload.

    Args:
        vector: Вектор любого домена
        sparse: Опускать элементы, равные нулю домена

    Returns:
        dict, соответствующий vector-контракту домена
    """
    field = vector.field
    entries = [
        {"index": entry.index, "element": field.encode(entry.element)}
        for entry in vector.entries
        if not (sparse and _is_structural_zero(field, entry.element))
    ]
    if not entries:
        first = vector.entry(1)
        entries = [{"index": first.index, "element": field.encode(first.element)}]
    return {"domain": field.name, "size": vector.size, "entries": entries}


def vector_from_payload(
    payload: Dict[str, Any], builder_type: type[AbstractVectorBuilder]
) -> AbstractVector:
    """
    Декодирование вектора из payload через builder домена.

    Args:
        payload: dict vector-контракта
        builder_type: класс builder'а целевого домена

    Returns:
        Вектор домена builder_type

    Raises:
        ValidationError: Если payload не соответствует контракту (включая тег домена)
        DuplicateIndexError: Если индекс повторяется
        IndexOverflowError: Если индекс превышает size
    """
    field = builder_type.field
    validate_vector_payload(payload, field)

    builder = builder_type(payload["size"])
    for entry in payload["entries"]:
        builder.put(entry["index"], field.decode(entry["element"]))
    return builder.build()


# =============================================================================
# MATRIX
# =============================================================================


def matrix_to_payload(matrix: AbstractMatrix, sparse: bool = False) -> Dict[str, Any]:
    """
    Кодирование матрицы в payload.

    Args:
        matrix: Матрица любого домена
        sparse: Опускать элементы, равные нулю домена

    Returns:
        dict, соответствующий matrix-контракту домена
    """
    field = matrix.field
    entries = [
        {"row": entry.row, "column": entry.column, "element": field.encode(entry.element)}
        for entry in matrix.entries
        if not (sparse and _is_structural_zero(field, entry.element))
    ]
    if not entries:
        first = matrix.entry(1, 1)
        entries = [{"row": 1, "column": 1, "element": field.encode(first.element)}]
    return {
        "domain": field.name,
        "rows": matrix.row_size,
        "columns": matrix.column_size,
        "entries": entries,
    }


def matrix_from_payload(
    payload: Dict[str, Any], builder_type: type[AbstractMatrixBuilder]
) -> AbstractMatrix:
    """
    Декодирование матрицы из payload через builder домена.

    Raises:
        ValidationError: Если payload не соответствует контракту
        DuplicateIndexError: Если ячейка повторяется
        IndexOverflowError: Если ячейка вне rows × columns
    """
    field = builder_type.field
    validate_matrix_payload(payload, field)

    builder = builder_type(payload["rows"], payload["columns"])
    for entry in payload["entries"]:
        builder.put(entry["row"], entry["column"], field.decode(entry["element"]))
    return builder.build()
