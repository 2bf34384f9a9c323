"""
JSON Schema Contract Validators

Модуль для валидации JSON payload векторов и матриц согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы:
- vector (schemas.vector_schema)
- matrix (schemas.matrix_schema)
"""

from typing import Any, Callable, Dict, Tuple

import jsonschema
from jsonschema import Draft202012Validator

from src.linear.contracts.schemas import matrix_schema, vector_schema
from src.linear.field import QuotientField


# =============================================================================
# SCHEMA REGISTRY
# =============================================================================


class SchemaRegistry:
    """
    Реестр JSON Schema контрактов.

    Строит схемы по домену и кэширует их после meta-валидации.
    """

    _FACTORIES: Dict[str, Callable[[QuotientField], Dict[str, Any]]] = {
        "vector": vector_schema,
        "matrix": matrix_schema,
    }

    def __init__(self):
        # Кэш построенных схем
        self._schemas: Dict[Tuple[str, QuotientField], Dict[str, Any]] = {}

    def load_schema(self, kind: str, field: QuotientField) -> Dict[str, Any]:
        """
        Получение схемы контракта.

        Args:
            kind: Вид контракта ('vector' или 'matrix')
            field: QuotientField домена

        Returns:
            Схема как dict

        Raises:
            KeyError: Если вид контракта неизвестен
            ValueError: Если построенная схема невалидна
        """
        key = (kind, field)
        if key in self._schemas:
            return self._schemas[key]

        if kind not in self._FACTORIES:
            raise KeyError(f"Unknown contract kind: {kind}")
        schema = self._FACTORIES[kind](field)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema for {field.name} {kind}: {e}") from e

        self._schemas[key] = schema
        return schema


# Глобальный экземпляр реестра
_SCHEMA_REGISTRY = SchemaRegistry()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, kind: str, field: QuotientField):
        """
        Args:
            kind: Вид контракта
            field: QuotientField домена
        """
        self.kind = kind
        self.field = field
        self.schema = _SCHEMA_REGISTRY.load_schema(kind, field)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class VectorContractValidator(ContractValidator):
    """Валидатор vector payload домена."""

    def __init__(self, field: QuotientField):
        super().__init__("vector", field)


class MatrixContractValidator(ContractValidator):
    """Валидатор matrix payload домена."""

    def __init__(self, field: QuotientField):
        super().__init__("matrix", field)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_vector_payload(data: Dict[str, Any], field: QuotientField) -> None:
    """
    Валидация vector payload.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    VectorContractValidator(field).validate(data)


def validate_matrix_payload(data: Dict[str, Any], field: QuotientField) -> None:
    """
    Валидация matrix payload.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MatrixContractValidator(field).validate(data)
