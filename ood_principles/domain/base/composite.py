"""Base composite - uniform dispatch of one capability over many values."""
from typing import Callable, Generic, Iterator, List, Sequence, Tuple, TypeVar

from ood_principles.helpers.logger import get_logger

T = TypeVar('T')
R = TypeVar('R')

logger = get_logger(__name__)


class CapabilityComposite(Generic[T]):
    """
    Ordered, immutable collection of values sharing one capability.

    Subclasses expose the capability under its own name and delegate to
    ``_dispatch``. The composite never inspects the concrete type of its
    items, so new implementors can be added without touching it.
    """

    def __init__(self, items: Sequence[T]):
        self._items: Tuple[T, ...] = tuple(items)

    @property
    def items(self) -> Tuple[T, ...]:
        """Stored values, in construction order."""
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def _dispatch(self, operation: Callable[[T], R]) -> List[R]:
        """
        Invoke operation on every item exactly once, in stored order.

        Exceptions raised by an item propagate unchanged and results gathered
        before the failure are discarded.

        Args:
            operation: Callable applied to each item

        Returns:
            One result per item, result[i] belonging to items[i]
        """
        logger.debug("Dispatching capability", composite=self.__class__.__name__, size=len(self._items))
        return [operation(item) for item in self._items]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._items)!r})"
