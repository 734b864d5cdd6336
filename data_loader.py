import re
from enum import Enum
from typing import Iterator, List, Tuple
from shop_cart import Cart, EmptyCategoryError

_INTEGER_TOKEN = re.compile(r"[0-9]+")


# --- PARSE ERRORS ---
class ParseErrorKind(str, Enum):
    MISSING_LINE = "MissingLine"
    MISSING_FIELD = "MissingField"
    NOT_AN_INTEGER = "NotAnInteger"


class ShopCartParseError(ValueError):
    kind: ParseErrorKind

    def __init__(self, message: str, line_number: int = 0):
        self.line_number = line_number
        if line_number:
            message = f"line {line_number}: {message}"
        super().__init__(f"{self.kind.value}: {message}")


class MissingLine(ShopCartParseError):
    kind = ParseErrorKind.MISSING_LINE


class MissingField(ShopCartParseError):
    kind = ParseErrorKind.MISSING_FIELD


class NotAnInteger(ShopCartParseError):
    kind = ParseErrorKind.NOT_AN_INTEGER


# --- HELPER FUNCTIONS ---
def _parse_int(token: str, line_number: int) -> int:
    if not _INTEGER_TOKEN.fullmatch(token):
        raise NotAnInteger(f"'{token}' is not a non-negative integer", line_number)
    return int(token)


def _next_line(lines: Iterator[Tuple[int, str]], expected: str) -> Tuple[int, List[str]]:
    try:
        line_number, line = next(lines)
    except StopIteration:
        raise MissingLine(f"expected {expected}, reached end of input") from None
    return line_number, line.split()


# --- PARSING FUNCTIONS ---
def parse_price_lists(text: str) -> Tuple[int, List[List[int]]]:
    """
    Decode the cart text format into a budget and one price list per category.

    Header line: budget followed by the option count of every category.
    Each following line holds that category's prices; tokens beyond the
    declared count are ignored.
    """
    lines = enumerate(text.splitlines(), start=1)

    header_number, header = _next_line(lines, "header line")
    if not header:
        raise MissingField("header has no budget", header_number)

    budget = _parse_int(header[0], header_number)
    declared_counts = [_parse_int(token, header_number) for token in header[1:]]

    price_lists: List[List[int]] = []
    for category_index, count in enumerate(declared_counts, start=1):
        line_number, tokens = _next_line(lines, f"line for category {category_index}")

        if len(tokens) < count:
            raise MissingField(
                f"category {category_index} declares {count} options, found {len(tokens)}",
                line_number
            )

        price_lists.append([_parse_int(token, line_number) for token in tokens[:count]])

    return budget, price_lists


def parse_cart(text: str) -> Cart:
    """Parse the text format straight into a Cart."""
    budget, price_lists = parse_price_lists(text)

    for category_index, prices in enumerate(price_lists, start=1):
        if not prices:
            raise EmptyCategoryError(f"category {category_index} declares zero options")

    return Cart.from_prices(budget, price_lists)


def load_cart_from_file(path: str) -> Cart:
    """Read and parse a cart file (UTF-8)."""
    with open(path, 'r', encoding='utf-8') as input_file:
        return parse_cart(input_file.read())
