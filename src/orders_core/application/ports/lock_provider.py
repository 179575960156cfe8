from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class LockProvider(ABC):
    """Port for keyed mutation locking.

    Contract:
    - acquire() MUST serialize access to the same key
    - acquire() MUST release the lock when the context exits (normal or exception)
    - acquire() MUST be blocking (waits until lock is available)
    - Different keys MUST NOT block each other
    - No ordering (FIFO/LIFO) among waiters is promised

    Used to keep two concurrent submissions of the same shopping cart
    from being converted into two orders.
    """

    @abstractmethod
    @contextmanager
    def acquire(self, key: str) -> Iterator[None]:
        """Acquire the lock for the given key.

        Args:
            key: Stable identifier of the mutated resource (e.g., a cart id).

        Yields:
            None. The lock is held for the duration of the context.

        Usage:
            with lock_provider.acquire(cart_id):
                # Critical section - lock is held
                ...
            # Lock is released here
        """
        ...
