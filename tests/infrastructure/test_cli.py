"""End-to-end tests of the click CLI against a temporary data directory."""

import pytest
from click.testing import CliRunner

from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.main import cli


@pytest.fixture()
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    bootstrap.settings.cache_clear()
    yield CliRunner()
    bootstrap.settings.cache_clear()


def _invoke(runner, *args):
    result = runner.invoke(cli, list(args))
    return result


def _register(runner, email, role="user"):
    result = _invoke(
        runner, "user", "register", "--name", email.split("@")[0],
        "--email", email, "--password", "secret1", "--role", role,
    )
    assert result.exit_code == 0, result.output


class TestCheckoutFlow:

    def test_seed_add_place_and_ship(self, runner):
        assert _invoke(runner, "product", "seed").exit_code == 0
        _register(runner, "alice@example.com")
        _register(runner, "root@example.com", role="admin")

        # Fresh Tomatoes (#1, 40) x2 and Fresh Milk (#4, 60) x1
        assert _invoke(runner, "cart", "add", "--user", "alice@example.com",
                       "--product", "1", "--quantity", "2").exit_code == 0
        _invoke(runner, "cart", "add", "--user", "alice@example.com", "--product", "4")

        placed = _invoke(runner, "order", "place", "--user", "alice@example.com",
                         "--address", "12 MG Road")
        assert placed.exit_code == 0, placed.output
        assert "Order #1 placed." in placed.output
        assert "₹190.00" in placed.output

        assert "Cart is empty." in _invoke(runner, "cart", "show", "--user", "alice@example.com").output

        shipped = _invoke(runner, "order", "status", "--user", "root@example.com",
                          "--id", "1", "--set", "shipped")
        assert "Order #1 is now shipped." in shipped.output

    def test_empty_cart_checkout_fails(self, runner):
        _register(runner, "alice@example.com")
        result = _invoke(runner, "order", "place", "--user", "alice@example.com")
        assert result.exit_code != 0
        assert "Cart is empty" in result.output

    def test_non_admin_cannot_change_status(self, runner):
        _register(runner, "alice@example.com")
        result = _invoke(runner, "order", "status", "--user", "alice@example.com",
                         "--id", "1", "--set", "shipped")
        assert result.exit_code != 0
        assert "Access denied" in result.output

    def test_unknown_user(self, runner):
        result = _invoke(runner, "cart", "show", "--user", "ghost@example.com")
        assert result.exit_code != 0
        assert "No user registered" in result.output
