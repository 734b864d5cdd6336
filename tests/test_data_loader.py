"""Tests for the cart text parser."""

import pytest

import data_loader
import optimizer
from data_loader import MissingField, MissingLine, NotAnInteger, ParseErrorKind, ShopCartParseError
from shop_cart import EmptyCategoryError
from tests.conftest import SCENARIO_A, SCENARIO_B, SCENARIO_D


class TestParsePriceLists:
    """Tests for parse_price_lists."""

    def test_scenario_a(self):
        """Header gives the budget and per-category counts."""
        assert data_loader.parse_price_lists(SCENARIO_A) == (10, [[3, 1], [5, 2, 8]])

    def test_indented_lines(self):
        """Surrounding whitespace is ignored."""
        text = "10 2 3\n              3 1\n              5 2 8"
        assert data_loader.parse_price_lists(text) == (10, [[3, 1], [5, 2, 8]])

    def test_trailing_tokens_ignored(self):
        """Only the declared number of prices is consumed."""
        text = "10 1 2\n4 99 junk\n1 2 3 4"
        assert data_loader.parse_price_lists(text) == (10, [[4], [1, 2]])

    def test_budget_only(self):
        """A header with just a budget declares no categories."""
        assert data_loader.parse_price_lists("12") == (12, [])

    def test_extra_lines_ignored(self):
        """Lines beyond the declared categories are not read."""
        assert data_loader.parse_price_lists("3 1\n2\nnot read") == (3, [[2]])


class TestParseErrors:
    """Tests for structured parse errors."""

    def test_empty_input_is_missing_line(self):
        """No header line at all."""
        with pytest.raises(MissingLine) as exc_info:
            data_loader.parse_cart("")
        assert exc_info.value.kind == ParseErrorKind.MISSING_LINE

    def test_scenario_d_missing_category_line(self):
        """A declared category without a line."""
        with pytest.raises(MissingLine):
            data_loader.parse_cart(SCENARIO_D)

    def test_blank_header_is_missing_field(self):
        """A header without a budget token."""
        with pytest.raises(MissingField) as exc_info:
            data_loader.parse_cart("   \n1 2")
        assert exc_info.value.kind == ParseErrorKind.MISSING_FIELD

    def test_short_category_line_is_missing_field(self):
        """Fewer prices than declared."""
        with pytest.raises(MissingField) as exc_info:
            data_loader.parse_cart("10 3\n1 2")
        assert exc_info.value.line_number == 2

    @pytest.mark.parametrize("text", [
        "ten 1\n5",
        "10 x\n5",
        "10 1\nfive",
        "10 1\n-5",
        "10 1\n2.5",
    ])
    def test_bad_tokens_are_not_an_integer(self, text):
        """Any token that is not a non-negative integer."""
        with pytest.raises(NotAnInteger) as exc_info:
            data_loader.parse_cart(text)
        assert exc_info.value.kind == ParseErrorKind.NOT_AN_INTEGER

    def test_ignored_tokens_are_not_validated(self):
        """Trailing tokens past the declared count are never decoded."""
        assert data_loader.parse_price_lists("10 1\n5 oops") == (10, [[5]])

    def test_errors_share_base_class(self):
        """All parse errors are ShopCartParseError and ValueError."""
        for error_type in (MissingLine, MissingField, NotAnInteger):
            assert issubclass(error_type, ShopCartParseError)
            assert issubclass(error_type, ValueError)

    def test_message_names_kind(self):
        """The error message starts with its kind."""
        with pytest.raises(NotAnInteger, match=r"^NotAnInteger: line 1:"):
            data_loader.parse_cart("abc")

    def test_zero_option_category(self):
        """A category declared with zero options is rejected."""
        with pytest.raises(EmptyCategoryError):
            data_loader.parse_cart("10 0 1\n\n5")


class TestParseCart:
    """Tests for parse_cart and load_cart_from_file."""

    def test_scenario_a_end_to_end(self):
        """Parsed scenario A costs 9."""
        assert optimizer.get_cost(data_loader.parse_cart(SCENARIO_A)) == 9

    def test_scenario_b_end_to_end(self):
        """Parsed scenario B is infeasible."""
        assert optimizer.get_cost(data_loader.parse_cart(SCENARIO_B)) == -1

    def test_load_from_file(self, write_input):
        """Files are read and parsed."""
        cart = data_loader.load_cart_from_file(write_input(SCENARIO_A))
        assert cart.budget == 10
        assert cart.price_lists == ((3, 1), (5, 2, 8))

    def test_missing_file(self, tmp_path):
        """A missing file propagates FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            data_loader.load_cart_from_file(str(tmp_path / "nope.txt"))
