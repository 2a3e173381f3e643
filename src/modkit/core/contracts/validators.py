"""
JSON Schema Contract Validators

Валидация JSON-данных по формальным JSON Schema контрактам (Draft 2020-12)
и реестр схем с мета-валидацией и кэшем.

Схемы регистрируются из dict или загружаются из каталога файлов
`<name>.json`; имя схемы — имя файла без расширения. Валидатор из
реестра передаётся в decoded_validated, который проверяет сырой JSON
перед типизированным декодированием (codable.decoded).
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Optional, TypeVar, Union

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from modkit.core.contracts.codable import DEFAULT_DECODER, DecoderConfig, type_adapter

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _check_schema(schema: Mapping[str, Any], name: str) -> None:
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema {name}: {e.message}") from e


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class ContractValidator:
    """
    Валидатор данных против одной JSON Schema.

    Схема проходит мета-валидацию при создании валидатора.

    Examples:
        >>> validator = ContractValidator({"type": "object", "required": ["id"]})
        >>> validator.is_valid({"id": 1})
        True
        >>> validator.is_valid({})
        False
    """

    def __init__(self, schema: Mapping[str, Any], name: str = "<inline>"):
        """
        Args:
            schema: JSON Schema (dict)
            name: Имя схемы для сообщений об ошибках

        Raises:
            ValueError: Если схема не проходит мета-валидацию
        """
        _check_schema(schema, name)
        self.schema_name = name
        self.schema = dict(schema)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)

    def __repr__(self) -> str:
        return f"ContractValidator({self.schema_name!r})"


# =============================================================================
# SCHEMA REGISTRY
# =============================================================================


class SchemaRegistry:
    """
    Реестр JSON Schema: регистрация, загрузка из каталога, кэш.

    Examples:
        >>> registry = SchemaRegistry()
        >>> registry.register("point", {"type": "object"})
        >>> "point" in registry
        True
    """

    def __init__(self, schema_dir: Optional[Union[str, Path]] = None):
        """
        Args:
            schema_dir: Каталог с файлами `<name>.json` (необязателен)

        Raises:
            NotADirectoryError: Если schema_dir задан, но не является каталогом
        """
        self._schema_dir = Path(schema_dir) if schema_dir is not None else None
        if self._schema_dir is not None and not self._schema_dir.is_dir():
            raise NotADirectoryError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем и валидаторов
        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._validators: Dict[str, ContractValidator] = {}

    def __contains__(self, schema_name: str) -> bool:
        return schema_name in self._schemas

    @property
    def names(self) -> list[str]:
        return sorted(self._schemas)

    def register(self, schema_name: str, schema: Mapping[str, Any]) -> None:
        """
        Регистрация схемы из dict (перезаписывает одноимённую).

        Raises:
            ValueError: Если схема не проходит мета-валидацию
        """
        _check_schema(schema, schema_name)
        self._schemas[schema_name] = dict(schema)
        self._validators.pop(schema_name, None)
        logger.debug("registered schema %s", schema_name)

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени: из кэша или из файла `<schema_dir>/<name>.json`.

        Raises:
            FileNotFoundError: Если схема не зарегистрирована и файла нет
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если схема не проходит мета-валидацию
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        if self._schema_dir is None:
            raise FileNotFoundError(f"Schema not registered: {schema_name}")

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        self.register(schema_name, schema)
        logger.debug("loaded schema %s from %s", schema_name, schema_path)
        return self._schemas[schema_name]

    def load_directory(self) -> list[str]:
        """
        Загрузка всех `*.json` из каталога схем.

        Returns:
            Отсортированный список имён загруженных схем
        """
        if self._schema_dir is None:
            raise FileNotFoundError("Schema directory is not configured")

        names = sorted(path.stem for path in self._schema_dir.glob("*.json"))
        for schema_name in names:
            self.load_schema(schema_name)
        logger.debug("loaded %d schemas from %s", len(names), self._schema_dir)
        return names

    def validator(self, schema_name: str) -> ContractValidator:
        """Кэшированный ContractValidator для схемы."""
        if schema_name not in self._validators:
            self._validators[schema_name] = ContractValidator(
                self.load_schema(schema_name), name=schema_name
            )
        return self._validators[schema_name]

    def validate(self, schema_name: str, data: Any) -> None:
        self.validator(schema_name).validate(data)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def decoded_validated(
    data: Union[bytes, str],
    type_: type[T],
    schema: Union[ContractValidator, Mapping[str, Any]],
    config: DecoderConfig = DEFAULT_DECODER,
) -> T:
    """
    Декодирование JSON с предварительной проверкой контракта.

    Сначала сырые данные проверяются JSON Schema, затем приводятся к type_.

    Raises:
        json.JSONDecodeError: Невалидный JSON
        ValidationError: Данные не соответствуют схеме
        pydantic.ValidationError: Данные не соответствуют type_
    """
    validator = schema if isinstance(schema, ContractValidator) else ContractValidator(schema)
    payload = json.loads(data)
    validator.validate(payload)
    return type_adapter(type_).validate_python(payload, strict=config.strict)
