"""
Contracts Module

Кодирование значений (JSON, property list), валидация JSON Schema
контрактов и сведения о приложении из Info-словаря.
"""

from .bundle import AppInfo, app_language
from .codable import (
    DecoderConfig,
    EncoderConfig,
    decode_key,
    decode_key_if_present,
    decoded,
    decoded_plist,
    encoded,
    encoded_plist,
)
from .validators import ContractValidator, SchemaRegistry, decoded_validated

__all__ = [
    # Codable
    "EncoderConfig",
    "DecoderConfig",
    "encoded",
    "decoded",
    "encoded_plist",
    "decoded_plist",
    "decode_key",
    "decode_key_if_present",
    # Validators
    "ContractValidator",
    "SchemaRegistry",
    "decoded_validated",
    # Bundle
    "AppInfo",
    "app_language",
]
