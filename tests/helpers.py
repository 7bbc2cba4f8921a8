from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel


@dataclass
class Item:
    id: int = 0
    name: Optional[str] = None


class Settings(BaseModel):
    theme: str = "light"
    font_size: int = 12
    tags: list[str] = []


class TripAfter:
    """Cancel signal that reports set once it has been polled `n` times."""

    def __init__(self, n: int) -> None:
        self.n = n
        self.calls = 0

    def is_set(self) -> bool:
        self.calls += 1
        return self.calls > self.n


class FailingSerializer:
    file_extension = ".json"

    def dump(self, value):
        raise RuntimeError("cannot encode")

    def load(self, data, target=None):
        raise RuntimeError("cannot decode")
