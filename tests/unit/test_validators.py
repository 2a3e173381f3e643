"""
Tests for JSON Schema Contract Validators

Тестирование валидаторов контрактов и реестра схем:
- Мета-валидация схем
- Валидация правильных данных и детекция нарушений
- Загрузка схем из каталога и кэш
- Декодирование с предварительной проверкой контракта
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as ModelValidationError

from modkit.core.contracts.validators import ContractValidator, SchemaRegistry, decoded_validated
from modkit.core.geometry import Point

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def point_schema() -> dict:
    """Схема точки: два обязательных числа."""
    return {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "type": "object",
        "required": ["x", "y"],
        "properties": {
            "x": {"type": "number"},
            "y": {"type": "number", "minimum": 0},
        },
        "additionalProperties": False,
    }


@pytest.fixture
def schema_dir(tmp_path: Path, point_schema: dict) -> Path:
    (tmp_path / "point.json").write_text(json.dumps(point_schema), encoding="utf-8")
    (tmp_path / "tag.json").write_text(json.dumps({"type": "string"}), encoding="utf-8")
    (tmp_path / "notes.txt").write_text("not a schema", encoding="utf-8")
    return tmp_path


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class TestContractValidator:
    """Тесты ContractValidator"""

    def test_valid_data(self, point_schema: dict) -> None:
        validator = ContractValidator(point_schema, name="point")
        validator.validate({"x": -1.5, "y": 2})
        assert validator.is_valid({"x": 0, "y": 0})

    def test_missing_required_field(self, point_schema: dict) -> None:
        validator = ContractValidator(point_schema)
        with pytest.raises(ValidationError, match="'y' is a required property"):
            validator.validate({"x": 1})

    def test_constraint_violation(self, point_schema: dict) -> None:
        validator = ContractValidator(point_schema)
        assert not validator.is_valid({"x": 1, "y": -1})
        assert not validator.is_valid({"x": "1", "y": 1})
        assert not validator.is_valid({"x": 1, "y": 1, "z": 1})

    def test_iter_errors_reports_all(self, point_schema: dict) -> None:
        validator = ContractValidator(point_schema)
        errors = list(validator.iter_errors({"x": "a", "y": -1}))
        assert len(errors) == 2

    def test_invalid_schema_rejected(self) -> None:
        with pytest.raises(ValueError, match="Invalid JSON Schema broken"):
            ContractValidator({"type": "no-such-type"}, name="broken")


# =============================================================================
# SCHEMA REGISTRY
# =============================================================================


class TestSchemaRegistry:
    """Тесты SchemaRegistry"""

    def test_register_and_validate(self, point_schema: dict) -> None:
        registry = SchemaRegistry()
        registry.register("point", point_schema)
        assert "point" in registry
        registry.validate("point", {"x": 1, "y": 1})
        with pytest.raises(ValidationError):
            registry.validate("point", {"x": 1})

    def test_register_invalid_schema(self) -> None:
        registry = SchemaRegistry()
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            registry.register("bad", {"minimum": "zero"})
        assert "bad" not in registry

    def test_unknown_schema_without_directory(self) -> None:
        with pytest.raises(FileNotFoundError, match="not registered"):
            SchemaRegistry().load_schema("point")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(NotADirectoryError):
            SchemaRegistry(tmp_path / "absent")

    def test_load_from_directory(self, schema_dir: Path, point_schema: dict) -> None:
        registry = SchemaRegistry(schema_dir)
        assert registry.load_schema("point") == point_schema
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            registry.load_schema("absent")

    def test_load_directory(self, schema_dir: Path) -> None:
        registry = SchemaRegistry(schema_dir)
        assert registry.load_directory() == ["point", "tag"]
        assert registry.names == ["point", "tag"]

    def test_schema_is_cached(self, schema_dir: Path) -> None:
        registry = SchemaRegistry(schema_dir)
        first = registry.load_schema("tag")
        (schema_dir / "tag.json").unlink()
        assert registry.load_schema("tag") is first

    def test_validator_is_cached_until_reregistered(self, point_schema: dict) -> None:
        registry = SchemaRegistry()
        registry.register("point", point_schema)
        validator = registry.validator("point")
        assert registry.validator("point") is validator

        registry.register("point", {"type": "object"})
        assert registry.validator("point") is not validator
        assert registry.validator("point").is_valid({})

    def test_invalid_json_file(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text("{", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            SchemaRegistry(tmp_path).load_schema("broken")


# =============================================================================
# DECODED VALIDATED
# =============================================================================


class TestDecodedValidated:
    """Тесты decoded_validated"""

    def test_valid_payload(self, point_schema: dict) -> None:
        assert decoded_validated(b'{"x": 1, "y": 2}', Point, point_schema) == Point(x=1, y=2)

    def test_accepts_validator(self, point_schema: dict) -> None:
        validator = ContractValidator(point_schema)
        assert decoded_validated('{"x": 0, "y": 0}', Point, validator) == Point.ZERO

    def test_accepts_registry_validator(self, point_schema: dict) -> None:
        registry = SchemaRegistry()
        registry.register("point", point_schema)
        payload = b'{"x": 3, "y": 4}'
        assert decoded_validated(payload, Point, registry.validator("point")) == Point(x=3, y=4)

    def test_schema_violation_before_decoding(self, point_schema: dict) -> None:
        with pytest.raises(ValidationError):
            decoded_validated(b'{"x": 1, "y": -2}', Point, point_schema)

    def test_type_violation_after_schema(self) -> None:
        with pytest.raises(ModelValidationError):
            decoded_validated(b'{"x": "abc"}', Point, {"type": "object"})

    def test_invalid_json(self, point_schema: dict) -> None:
        with pytest.raises(json.JSONDecodeError):
            decoded_validated(b"{", Point, point_schema)
