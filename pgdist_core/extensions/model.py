"""Extension metadata exposed by repositories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AvailableExtension:
    """An installable extension offered by a repository namespace."""

    namespace: str
    name: str
    description: str

    @property
    def qualified_name(self) -> str:
        """Return the ``namespace:name`` identifier."""

        return f"{self.namespace}:{self.name}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "namespace": self.namespace,
            "name": self.name,
            "description": self.description,
        }
