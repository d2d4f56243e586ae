import click

from shophub.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_set,
    cart_show,
)
from shophub.infrastructure.cli.catalog_commands import (
    catalog_list,
    catalog_refresh,
    catalog_search,
)
from shophub.infrastructure.cli.student_commands import (
    students_list,
    students_proxy,
    students_stats,
)
from shophub.infrastructure.config import load_settings
from shophub.infrastructure.logging import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """ShopHub: catalog, cart and student dashboard"""
    configure_logging("DEBUG" if verbose else load_settings().log_level)


@cli.group()
def catalog() -> None:
    """Browse and reload the product catalog."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def students() -> None:
    """Student records dashboard."""


# Register subcommands
catalog.add_command(catalog_list)
catalog.add_command(catalog_refresh)
catalog.add_command(catalog_search)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_set)
cart.add_command(cart_show)
students.add_command(students_list)
students.add_command(students_proxy)
students.add_command(students_stats)
