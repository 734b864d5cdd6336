from typing import Any, List, Optional, Sequence, Tuple
from shop_cart import EmptyCategoryError


def count_combinations(categories: Sequence[Sequence[Any]]) -> int:
    """Number of combinations the enumerator will produce (1 for no categories)."""
    total = 1
    for category in categories:
        total *= len(category)
    return total


class CombinationEnumerator:
    """
    Lazily yields every way of picking one element from each category.

    Works like an odometer: the first category is the fastest-changing digit,
    and a digit at its last index wraps to 0 while carrying into the next one.
    Only one cursor per category is kept, so the full cartesian product is
    never held in memory. Single-pass: once exhausted it stays exhausted.
    """

    def __init__(self, categories: Sequence[Sequence[Any]]):
        self._categories: List[Sequence[Any]] = list(categories)
        for position, category in enumerate(self._categories):
            if len(category) == 0:
                raise EmptyCategoryError(f"Category {position} has no options")
        self._cursors: List[int] = [0] * len(self._categories)
        self._ended = False
        self.produced = 0

    @property
    def ended(self) -> bool:
        return self._ended

    def __iter__(self) -> "CombinationEnumerator":
        return self

    def __next__(self) -> Tuple[Any, ...]:
        if self._ended:
            raise StopIteration

        combination = tuple(
            category[cursor] for category, cursor in zip(self._categories, self._cursors)
        )
        self._arrange_next_combination()
        self.produced += 1
        return combination

    def next_combination(self) -> Optional[Tuple[Any, ...]]:
        """Like next(), but returns None at the end instead of raising."""
        try:
            return next(self)
        except StopIteration:
            return None

    def _arrange_next_combination(self) -> None:
        for position, category in enumerate(self._categories):
            if self._cursors[position] < len(category) - 1:
                self._cursors[position] += 1
                return
            # Carry: this digit wraps and the next one is tried
            self._cursors[position] = 0

        # Every digit was at its maximum (or there are no digits at all)
        self._ended = True
