from __future__ import annotations

import random
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def random(self) -> float: ...

    def pick(self, items: Sequence[T]) -> T: ...

    def int(self, low: int, high: int) -> int: ...


class SeededRandom(random.Random):
    def pick(self, items: Sequence[T]) -> T:
        return self.choice(items)

    def int(self, low: int, high: int) -> int:
        return self.randint(low, high)
