from dataclasses import dataclass
from typing import Optional, Tuple
import config
from combinations import CombinationEnumerator, count_combinations
from shop_cart import Cart, Option

Combination = Tuple[Option, ...]


@dataclass(frozen=True)
class SearchSummary:
    combinations_checked: int
    feasible_combinations: int
    best_cost: int
    best_prices: Optional[Tuple[int, ...]]


# --- CORE OPTIMIZATION FUNCTIONS ---
def calculate_combination_cost(combination: Combination) -> int:
    """Total price of one option per category."""
    return sum(option.price for option in combination)


def _search(cart: Cart, verbose: bool) -> Tuple[Optional[Combination], int, int, int]:
    best_combination: Optional[Combination] = None
    best_cost = config.NO_FEASIBLE_COST
    feasible = 0
    progress_every = max(1, config.PROGRESS_INTERVAL)

    enumerator = CombinationEnumerator(cart.categories)

    if verbose:
        print(f"\n=== OPTIMIZATION START ===")
        print(f"Budget: {cart.budget}")
        print(f"Number of categories: {len(cart.categories)}")
        print(f"Combinations to check: {count_combinations(cart.categories):,}")

    for combination in enumerator:
        cost = calculate_combination_cost(combination)

        if verbose and enumerator.produced % progress_every == 0:
            print(f"  Checked {enumerator.produced:,} combinations (best so far: {best_cost})")

        if cost > cart.budget:
            continue

        feasible += 1
        if cost > best_cost:
            best_cost = cost
            best_combination = combination
            if verbose:
                prices = " + ".join(str(option.price) for option in combination) or "0"
                print(f"  NEW BEST! {prices} = {cost}")

    if verbose:
        print(f"  Checked: {enumerator.produced:,}, Feasible: {feasible:,}")
        if best_combination is None:
            print("  No combination fits the budget.")
        print(f"\n=== OPTIMIZATION COMPLETE ===")

    return best_combination, best_cost, enumerator.produced, feasible


def find_best_combination(cart: Cart, verbose: bool = False) -> Tuple[Optional[Combination], int]:
    """
    Exhaustively search for the most expensive combination within budget.

    Returns the first combination reaching the maximum cost together with that
    cost, or (None, -1) when every combination exceeds the budget.
    """
    best_combination, best_cost, _, _ = _search(cart, verbose)
    return best_combination, best_cost


def get_cost(cart: Cart, verbose: bool = False) -> int:
    """Maximum feasible cost of the cart, or -1 when nothing fits."""
    _, best_cost = find_best_combination(cart, verbose)
    return best_cost


def summarize_search(cart: Cart, verbose: bool = False) -> SearchSummary:
    best_combination, best_cost, checked, feasible = _search(cart, verbose)
    best_prices = None
    if best_combination is not None:
        best_prices = tuple(option.price for option in best_combination)
    return SearchSummary(checked, feasible, best_cost, best_prices)
