"""Shape records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A width/height pair with a derived area."""

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height
