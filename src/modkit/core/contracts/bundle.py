"""
AppInfo — сведения о приложении из Info-словаря

Info-словарь — property list бандла приложения (Info.plist). Значения
читаются по стандартным ключам; отсутствующие и нестроковые значения
превращаются в пустую строку.
"""

import logging
import plistlib
from pathlib import Path
from typing import Any, Final, Mapping, Optional, Sequence, Union

from pydantic import BaseModel

logger = logging.getLogger(__name__)

DISPLAY_NAME_KEY: Final[str] = "CFBundleDisplayName"
SHORT_VERSION_KEY: Final[str] = "CFBundleShortVersionString"
BUILD_VERSION_KEY: Final[str] = "CFBundleVersion"

DEFAULT_LANGUAGE: Final[str] = "en"


def _string_value(info: Mapping[str, Any], key: str) -> str:
    value = info.get(key)
    return value if isinstance(value, str) else ""


class AppInfo(BaseModel):
    """
    Имя, версия и номер сборки приложения.

    Examples:
        >>> AppInfo.from_info_dictionary({"CFBundleDisplayName": "Notes", "CFBundleVersion": 42})
        AppInfo(name='Notes', version='', build='')
    """

    name: str = ""
    version: str = ""
    build: str = ""

    model_config = {"frozen": True}

    @classmethod
    def from_info_dictionary(cls, info: Optional[Mapping[str, Any]]) -> "AppInfo":
        """
        Args:
            info: Info-словарь; None трактуется как пустой словарь
        """
        info = info or {}
        return cls(
            name=_string_value(info, DISPLAY_NAME_KEY),
            version=_string_value(info, SHORT_VERSION_KEY),
            build=_string_value(info, BUILD_VERSION_KEY),
        )

    @classmethod
    def from_plist(cls, path: Union[str, Path]) -> "AppInfo":
        """
        Чтение Info.plist (XML или binary).

        Raises:
            FileNotFoundError: Файл не найден
            plistlib.InvalidFileException: Файл не является property list
        """
        with open(path, "rb") as f:
            info = plistlib.load(f)

        if not isinstance(info, dict):
            logger.warning("Info plist %s is not a dictionary, ignoring contents", path)
            info = {}
        return cls.from_info_dictionary(info)


def app_language(preferred_localizations: Sequence[str]) -> str:
    """
    Первая предпочтительная локализация или "en".

    Examples:
        >>> app_language(["ru", "en"])
        'ru'
        >>> app_language([])
        'en'
    """
    if not preferred_localizations:
        return DEFAULT_LANGUAGE
    return preferred_localizations[0]
