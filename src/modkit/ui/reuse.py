"""
Reuse — реестр переиспользуемых представлений

Класс представления объявляет идентификатор явно:

    class MessageCell:
        REUSE_IDENTIFIER = "MessageCell"

Реестр хранит фабрику для каждого идентификатора и очередь отработавших
экземпляров. dequeue сначала отдаёт экземпляр из очереди и только потом
создаёт новый.
"""

import logging
from collections import defaultdict, deque
from typing import Any, Callable, Deque, Dict, Optional, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")

REUSE_IDENTIFIER_ATTRIBUTE = "REUSE_IDENTIFIER"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MissingReuseIdentifier(TypeError):
    """Класс не объявляет непустой строковый REUSE_IDENTIFIER."""


class ReuseIdentifierNotRegistered(KeyError):
    """Для идентификатора не зарегистрирована фабрика."""


# =============================================================================
# HELPERS
# =============================================================================


def reuse_identifier(view_type: type) -> str:
    """
    Идентификатор переиспользования класса.

    Raises:
        MissingReuseIdentifier: Если атрибут отсутствует, пуст или не строка
    """
    identifier = getattr(view_type, REUSE_IDENTIFIER_ATTRIBUTE, None)
    if not isinstance(identifier, str) or not identifier:
        raise MissingReuseIdentifier(
            f"{view_type.__qualname__} must declare a non-empty {REUSE_IDENTIFIER_ATTRIBUTE}"
        )
    return identifier


# =============================================================================
# REGISTRY
# =============================================================================


class ReusableViewRegistry:
    """
    Реестр фабрик и очередей переиспользования.

    Examples:
        >>> class Cell:
        ...     REUSE_IDENTIFIER = "Cell"
        >>> registry = ReusableViewRegistry()
        >>> registry.register(Cell)
        >>> cell = registry.dequeue(Cell)
        >>> registry.enqueue(cell)
        >>> registry.dequeue(Cell) is cell
        True
    """

    def __init__(self) -> None:
        self._factories: Dict[str, Callable[[], Any]] = {}
        self._queues: Dict[str, Deque[Any]] = defaultdict(deque)

    def __contains__(self, view_type: type) -> bool:
        return reuse_identifier(view_type) in self._factories

    def register(self, view_type: type, factory: Optional[Callable[[], Any]] = None) -> None:
        """
        Регистрация класса представления.

        Args:
            view_type: Класс с REUSE_IDENTIFIER
            factory: Фабрика экземпляров (по умолчанию — вызов view_type())

        Повторная регистрация заменяет фабрику и очищает очередь.
        """
        identifier = reuse_identifier(view_type)
        self._factories[identifier] = factory if factory is not None else view_type
        self._queues.pop(identifier, None)
        logger.debug("registered reusable view %s", identifier)

    def dequeue(self, view_type: type[V]) -> V:
        """
        Экземпляр из очереди или новый экземпляр из фабрики.

        Raises:
            MissingReuseIdentifier: Класс без REUSE_IDENTIFIER
            ReuseIdentifierNotRegistered: Класс не зарегистрирован
        """
        identifier = reuse_identifier(view_type)
        if identifier not in self._factories:
            raise ReuseIdentifierNotRegistered(identifier)

        queue = self._queues[identifier]
        if queue:
            logger.debug("reusing queued view %s", identifier)
            return queue.popleft()

        logger.debug("creating view %s", identifier)
        return self._factories[identifier]()

    def enqueue(self, view: Any) -> None:
        """
        Возврат отработавшего экземпляра в очередь его класса.

        Raises:
            ReuseIdentifierNotRegistered: Класс экземпляра не зарегистрирован
        """
        identifier = reuse_identifier(type(view))
        if identifier not in self._factories:
            raise ReuseIdentifierNotRegistered(identifier)
        self._queues[identifier].append(view)

    def queued_count(self, view_type: type) -> int:
        return len(self._queues.get(reuse_identifier(view_type), ()))
