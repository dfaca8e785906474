"""Token resolution contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ResolvedToken:
    """A GitHub token and a label for where it came from.

    ``source`` is safe to log; ``value`` is kept out of ``repr``.
    """

    value: str = field(repr=False)
    source: str


class TokenResolver(ABC):
    @abstractmethod
    def resolve(self) -> ResolvedToken:
        """Return the token or raise :class:`AuthenticationError`."""
