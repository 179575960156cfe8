from __future__ import annotations

from abc import ABC, abstractmethod


class NumberGenerator(ABC):
    """Port for human-readable document number generation."""

    @abstractmethod
    def generate(self, template: str) -> str:
        """Generate a unique number from a template.

        Args:
            template: str.format() template; {0} receives the current UTC
                datetime and {1} a sequence counter,
                e.g. "PI{0:%y%m%d}-{1:05d}".
        """
