import argparse
import sys
from typing import List, Optional
import config
import data_loader
import optimizer
from combinations import count_combinations
from shop_cart import Cart


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the most expensive cart that still fits the budget."
    )
    parser.add_argument(
        "input", nargs="?", default=None,
        help="Cart file ('-' for stdin). Defaults to SHOP_CART_INPUT_FILE, then stdin."
    )
    parser.add_argument("--budget", type=int, default=None, help="Override the budget from the header line")
    parser.add_argument("--verbose", action="store_true", default=config.VERBOSE, help="Print search progress")
    parser.add_argument("--quiet", action="store_true", help="Only print the resulting cost")
    return parser


def _read_cart(source: Optional[str]) -> Cart:
    if source is None or source == "-":
        return data_loader.parse_cart(sys.stdin.read())
    return data_loader.load_cart_from_file(source)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    source = args.input if args.input is not None else config.CART_INPUT_FILE

    try:
        cart = _read_cart(source)
        if args.budget is not None:
            cart = cart.with_budget(args.budget)
    except FileNotFoundError:
        print(f"Error: input file '{source}' not found.", file=sys.stderr)
        return config.EXIT_USAGE_ERROR
    except ValueError as e:
        # ShopCartParseError, EmptyCategoryError and bad amounts all land here
        print(f"Error: {e}", file=sys.stderr)
        return config.EXIT_PARSE_ERROR

    if args.quiet:
        print(optimizer.get_cost(cart, verbose=args.verbose))
        return config.EXIT_OK

    print("=" * 60)
    print("SHOP CART BUDGET OPTIMIZER")
    print("=" * 60)
    print(f"Budget: {cart.budget}")
    print(f"Categories: {len(cart.categories)}")
    for index, category in enumerate(cart.categories, start=1):
        print(f"  {index}: {', '.join(str(price) for price in category.prices)}")
    print(f"Combinations: {count_combinations(cart.categories):,}")
    print("=" * 60)

    summary = optimizer.summarize_search(cart, verbose=args.verbose)

    print("\n" + "=" * 60)
    print("RESULT")
    print("=" * 60)
    if summary.best_prices is not None:
        print(f"✅ Best cost: {summary.best_cost}")
        print(f"📋 Picked prices: {' + '.join(str(p) for p in summary.best_prices) or '(none)'}")
    else:
        print(f"❌ No combination fits the budget: {summary.best_cost}")
    print(f"Feasible: {summary.feasible_combinations:,} of {summary.combinations_checked:,}")
    print("=" * 60)

    return config.EXIT_OK


# --- MAIN EXECUTION ---
if __name__ == "__main__":
    sys.exit(main())
