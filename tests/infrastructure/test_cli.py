"""End-to-end tests for the CLI against a temporary JSON catalog."""

import pytest
from click.testing import CliRunner

from storefront.config import reset_settings
from storefront.infrastructure.cli.main import cli


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("STOREFRONT_PAGE_SIZE", "9")
    reset_settings()
    yield CliRunner()
    reset_settings()


def _invoke(runner, *args):
    result = runner.invoke(cli, list(args))
    assert result.exit_code == 0, result.output
    return result.output


class TestShop:

    def test_empty_shop(self, runner):
        output = _invoke(runner, "shop", "list")
        assert "Featured" in output
        assert "No products found." in output

    def test_featured_product_on_home(self, runner):
        _invoke(runner, "product", "add", "--name", "Laptop 1", "--price", "1499.99", "--featured")
        _invoke(runner, "product", "add", "--name", "Laptop 2", "--price", "999.99")
        output = _invoke(runner, "shop", "home")
        assert "Laptop 1" in output
        assert "$1499.99" in output
        assert "Laptop 2" not in output

    def test_sort_and_page(self, runner):
        for name, price in [("Product Middle", "150"), ("Product Low", "100"), ("Product High", "200")]:
            _invoke(runner, "product", "add", "--name", name, "--price", price, "--featured")
        output = _invoke(runner, "shop", "list", "--sort", "high_low")
        assert output.index("Product High") < output.index("Product Middle") < output.index("Product Low")
        assert "No products found." in _invoke(runner, "shop", "list", "--page", "2")

    def test_category_filter(self, runner):
        _invoke(runner, "product", "add", "--name", "Laptop 1", "--price", "10")
        _invoke(runner, "product", "add", "--name", "Desktop 1", "--price", "10")
        _invoke(runner, "category", "add", "--name", "laptops", "--slug", "laptops")
        _invoke(runner, "category", "attach", "--product", "Laptop 1", "--slug", "laptops")
        output = _invoke(runner, "shop", "list", "--all", "--category", "laptops")
        assert "Laptop 1" in output
        assert "Desktop 1" not in output


    def test_oversized_price_is_an_error(self, runner):
        result = runner.invoke(cli, ["product", "add", "--name", "Laptop 1", "--price", "1e30"])
        assert result.exit_code == 1
        assert "Invalid money amount" in result.output


class TestCart:

    def test_special_price_applied(self, runner):
        _invoke(runner, "product", "add", "--name", "Product A", "--price", "0.50")
        _invoke(runner, "offer", "add", "--product", "Product A", "--min-qty", "3", "--price", "1.30", "--bundle")
        output = _invoke(runner, "cart", "price", "--items", "Product A:3")
        assert "Special price applied" in output
        assert "$1.30" in output

    def test_no_special_below_minimum(self, runner):
        _invoke(runner, "product", "add", "--name", "Product A", "--price", "0.50")
        _invoke(runner, "offer", "add", "--product", "Product A", "--min-qty", "3", "--price", "1.30", "--bundle")
        output = _invoke(runner, "cart", "price", "--items", "Product A:1")
        assert "Special price applied" not in output
        assert "$0.50" in output

    def test_invalid_quantity_is_an_error(self, runner):
        _invoke(runner, "product", "add", "--name", "Product A", "--price", "0.50")
        result = runner.invoke(cli, ["cart", "price", "--items", "Product A:0"])
        assert result.exit_code == 1
        assert "must be positive" in result.output

    def test_bad_item_format(self, runner):
        result = runner.invoke(cli, ["cart", "price", "--items", "Product A"])
        assert result.exit_code == 2
        assert "Expected 'ProductName:Quantity'" in result.output
