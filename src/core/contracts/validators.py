"""
JSON Schema Contract Validators

Валидация записей (record) целых чисел согласно формальному JSON Schema
контракту. Схемы поставляются внутри пакета (src/core/contracts/schema/)
и читаются через importlib.resources.

Схемы:
- int_base10.json ({"p": [...], "n": [...]})
"""

import json
from importlib import resources
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Загрузчик JSON Schema из ресурсов пакета (с кэшем)"""

    def __init__(self, package: str = __package__):
        self._schema_dir = resources.files(package) / "schema"
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени без расширения (например, 'int_base10').

        Raises:
            FileNotFoundError: Если схемы нет среди ресурсов пакета
            ValueError: Если схема сама по себе невалидна
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        resource = self._schema_dir / f"{schema_name}.json"
        if not resource.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_name}.json")

        schema = json.loads(resource.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор данных против одной JSON Schema"""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.validator = Draft202012Validator(_SCHEMA_LOADER.load_schema(schema_name))

    def error_messages(self, data: Any) -> list[str]:
        """
        Все нарушения схемы одним списком.

        Returns:
            Сообщения вида "<путь>: <ошибка>", упорядоченные по пути;
            пустой список для валидных данных
        """
        errors = sorted(self.validator.iter_errors(data), key=lambda e: list(map(str, e.path)))
        return [f"{'/'.join(map(str, e.path)) or '<root>'}: {e.message}" for e in errors]


class IntRecordValidator(ContractValidator):
    """Валидатор для int_base10 записи"""

    def __init__(self):
        super().__init__("int_base10")


_INT_RECORD_VALIDATOR = IntRecordValidator()


def validate_int_record(data: Any) -> list[str]:
    """
    Проверка int_base10 записи.

    Args:
        data: Запись вида {"p": [...], "n": [...]}

    Returns:
        Список нарушений контракта (пустой, если запись валидна)
    """
    return _INT_RECORD_VALIDATOR.error_messages(data)
