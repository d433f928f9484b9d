"""Field — column descriptor built from an ORT header."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Field:
    name: str
    children: list["Field"] = field(default_factory=list)  # tuple members

    @property
    def is_nested(self) -> bool:
        return bool(self.children)

    def __str__(self) -> str:
        if not self.children:
            return self.name
        return f"{self.name}({','.join(str(c) for c in self.children)})"
