"""
Codable — JSON / property list кодирование значений

Тонкие обёртки над pydantic (TypeAdapter), json и plistlib:
- encoded / decoded — JSON bytes <-> типизированное значение
- encoded_plist / decoded_plist — property list bytes <-> значение
- decode_key / decode_key_if_present — типизированное чтение ключа из
  уже разобранного JSON-объекта

Ошибки библиотек пробрасываются без обёртывания:
- pydantic.ValidationError — невалидный JSON или данные не соответствуют типу
- TypeError — значение не представимо в plist
- plistlib.InvalidFileException — повреждённый plist при декодировании
"""

import json
import logging
import plistlib
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Mapping, Optional, TypeVar, Union

from pydantic import TypeAdapter

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ANY_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class EncoderConfig:
    """
    Параметры кодирования.

    Attributes:
        indent: Отступ JSON (None — компактный вывод)
        sort_keys: Сортировать ключи объектов
        by_alias: Использовать alias полей моделей
        exclude_none: Не выводить поля со значением None
    """

    indent: Optional[int] = None
    sort_keys: bool = False
    by_alias: bool = True
    exclude_none: bool = False


@dataclass(frozen=True)
class DecoderConfig:
    """strict=True отключает приведение типов pydantic ("1" -> 1 и т.п.)."""

    strict: bool = False


DEFAULT_ENCODER: EncoderConfig = EncoderConfig()
DEFAULT_DECODER: DecoderConfig = DecoderConfig()


@lru_cache(maxsize=256)
def type_adapter(type_: Any) -> TypeAdapter[Any]:
    """Кэшированный TypeAdapter для типа (модели, generic-алиасы, примитивы)."""
    return TypeAdapter(type_)


def _jsonable(value: Any, by_alias: bool, exclude_none: bool) -> Any:
    return _ANY_ADAPTER.dump_python(
        value, mode="json", by_alias=by_alias, exclude_none=exclude_none
    )


# =============================================================================
# JSON
# =============================================================================


def encoded(value: Any, config: EncoderConfig = DEFAULT_ENCODER) -> bytes:
    """
    Кодирование значения в JSON (UTF-8 bytes).

    Args:
        value: Pydantic модель, dataclass, коллекция или примитив
        config: Параметры кодирования

    Returns:
        JSON в виде bytes

    Examples:
        >>> encoded({"b": 1, "a": [1, 2]}, EncoderConfig(sort_keys=True))
        b'{"a": [1, 2], "b": 1}'
    """
    payload = _jsonable(value, config.by_alias, config.exclude_none)
    text = json.dumps(
        payload,
        indent=config.indent,
        sort_keys=config.sort_keys,
        ensure_ascii=False,
        allow_nan=False,
    )
    return text.encode("utf-8")


def decoded(
    data: Union[bytes, str],
    type_: type[T],
    config: DecoderConfig = DEFAULT_DECODER,
) -> T:
    """
    Декодирование JSON в значение типа type_.

    Raises:
        pydantic.ValidationError: Невалидный JSON или несоответствие типу
    """
    logger.debug("decoding JSON (%d bytes) as %r", len(data), type_)
    return type_adapter(type_).validate_json(data, strict=config.strict)


# =============================================================================
# PROPERTY LIST
# =============================================================================


def encoded_plist(value: Any, fmt: plistlib.PlistFormat = plistlib.FMT_XML) -> bytes:
    """
    Кодирование значения в property list.

    None в plist не представим, поэтому поля со значением None опускаются.

    Args:
        value: Кодируемое значение
        fmt: plistlib.FMT_XML или plistlib.FMT_BINARY
    """
    payload = _jsonable(value, by_alias=True, exclude_none=True)
    return plistlib.dumps(payload, fmt=fmt)


def decoded_plist(data: bytes, type_: type[T], config: DecoderConfig = DEFAULT_DECODER) -> T:
    """Декодирование property list (XML или binary) в значение типа type_."""
    logger.debug("decoding plist (%d bytes) as %r", len(data), type_)
    return type_adapter(type_).validate_python(plistlib.loads(data), strict=config.strict)


# =============================================================================
# KEYED CONTAINER
# =============================================================================


def decode_key(
    container: Mapping[str, Any],
    key: str,
    type_: type[T],
    config: DecoderConfig = DEFAULT_DECODER,
) -> T:
    """
    Типизированное значение ключа объекта.

    Raises:
        KeyError: Ключ отсутствует
        pydantic.ValidationError: Значение (в т.ч. null) не соответствует типу

    Examples:
        >>> decode_key({"count": "3"}, "count", int)
        3
    """
    if key not in container:
        raise KeyError(key)
    return type_adapter(type_).validate_python(container[key], strict=config.strict)


def decode_key_if_present(
    container: Mapping[str, Any],
    key: str,
    type_: type[T],
    config: DecoderConfig = DEFAULT_DECODER,
) -> Optional[T]:
    """Как decode_key, но None для отсутствующего ключа или значения null."""
    value = container.get(key)
    if value is None:
        return None
    return type_adapter(type_).validate_python(value, strict=config.strict)
