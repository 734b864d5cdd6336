from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence, Tuple


class EmptyCategoryError(ValueError):
    """Raised when an option category has no options to choose from."""


def _check_amount(value: int, what: str) -> int:
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{what} must be non-negative, got {value}")
    return value


# --- DATA MODEL ---
@dataclass(frozen=True, order=True)
class Option:
    price: int

    def __post_init__(self):
        _check_amount(self.price, "Option price")

    @classmethod
    def from_price(cls, price: int) -> "Option":
        return cls(price)


@dataclass(frozen=True)
class OptionCategory:
    """Mutually exclusive options; exactly one is picked per cart."""
    options: Tuple[Option, ...]

    def __post_init__(self):
        object.__setattr__(self, "options", tuple(self.options))
        if not self.options:
            raise EmptyCategoryError("Option category must contain at least one option")
        for option in self.options:
            if not isinstance(option, Option):
                raise ValueError(f"Expected Option, got {option!r}")

    @classmethod
    def from_prices(cls, prices: Iterable[int]) -> "OptionCategory":
        return cls(tuple(Option.from_price(price) for price in prices))

    @property
    def prices(self) -> Tuple[int, ...]:
        return tuple(option.price for option in self.options)

    def __len__(self) -> int:
        return len(self.options)

    def __getitem__(self, index: int) -> Option:
        return self.options[index]

    def __iter__(self) -> Iterator[Option]:
        return iter(self.options)


@dataclass(frozen=True)
class Cart:
    budget: int
    categories: Tuple[OptionCategory, ...] = field(default_factory=tuple)

    def __post_init__(self):
        _check_amount(self.budget, "Budget")
        object.__setattr__(self, "categories", tuple(self.categories))

    @classmethod
    def from_prices(cls, budget: int, price_lists: Iterable[Iterable[int]]) -> "Cart":
        categories = tuple(OptionCategory.from_prices(prices) for prices in price_lists)
        return cls(budget, categories)

    def with_budget(self, budget: int) -> "Cart":
        """Same categories, different budget."""
        return Cart(budget, self.categories)

    @property
    def price_lists(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(category.prices for category in self.categories)


def build_cart(budget: int, price_lists: Sequence[Sequence[int]]) -> Cart:
    """Build a Cart from a budget and one price list per category."""
    return Cart.from_prices(budget, price_lists)
