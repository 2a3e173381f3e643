"""
Core helpers, value types, and codable contracts.

Модули этого пакета не зависят от UI-тулкита: только стандартная библиотека,
pydantic и jsonschema.
"""
