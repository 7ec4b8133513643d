from random import Random
from typing import Iterable


FOODS = ("pizza", "garden salad", "chow mein", "burrito")


class Food:
    def __init__(
        self,
        foods: Iterable[str] = FOODS,
        *,
        rng: Random | None = None,
    ) -> None:
        self._foods = tuple(foods)
        if not self._foods:
            raise ValueError("No foods.")
        self._rng = Random() if rng is None else rng

    def randomize(self) -> str:
        return self._foods[self._rng.randrange(len(self._foods))]
