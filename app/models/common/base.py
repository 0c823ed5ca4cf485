"""Base class for frequency entities."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class BaseEntity:
    """Dataclass entity that serializes to plain JSON-ready dicts."""

    def to_dict(self) -> dict[str, Any]:
        """Nested dataclasses become dicts, top-level tuples become lists."""
        data = asdict(self)
        return {k: list(v) if isinstance(v, tuple) else v for k, v in data.items()}
