"""
Contract Validation Module

Модуль для валидации и (де)сериализации JSON payload векторов и матриц.
"""

from .codec import (
    matrix_from_payload,
    matrix_to_payload,
    vector_from_payload,
    vector_to_payload,
)
from .schemas import matrix_schema, vector_schema
from .validators import (
    ContractValidator,
    MatrixContractValidator,
    SchemaRegistry,
    VectorContractValidator,
    validate_matrix_payload,
    validate_vector_payload,
)

__all__ = [
    # Schemas
    "vector_schema",
    "matrix_schema",
    # Classes
    "SchemaRegistry",
    "ContractValidator",
    "VectorContractValidator",
    "MatrixContractValidator",
    # Functions
    "validate_vector_payload",
    "validate_matrix_payload",
    "vector_to_payload",
    "vector_from_payload",
    "matrix_to_payload",
    "matrix_from_payload",
]
