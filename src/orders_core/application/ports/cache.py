from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


class ComputationCache(ABC):
    """Port for a single-flight, per-key computation cache.

    Contract:
    - At most one computation per key is in flight at any time
    - Concurrent callers for the same key receive the same value
    - Different keys compute independently
    - A failed computation is not cached; its error reaches every
      caller that waited on it
    """

    @abstractmethod
    def get_or_compute(self, key: str, compute: Callable[[], Any]) -> Any:
        """Return the cached value for key, computing it if absent or expired."""
