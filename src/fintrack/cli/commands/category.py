"""Category management commands."""

import click
from fintrack.cli.error_handling import handle_domain_error
from fintrack.cli.rendering import heading
from fintrack.domain.category import CategoryService
from fintrack.domain.errors import DomainError

KIND_CHOICE = click.Choice(["income", "expense"], case_sensitive=False)


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.option("--type", "kind", type=KIND_CHOICE, help="Only show income or expense categories")
@click.pass_context
def list_categories(ctx, kind: str | None):
    """List categories."""
    db = ctx.obj["db"]
    preferences = ctx.obj["preferences"]
    service = CategoryService(db)

    try:
        categories = service.list_categories(kind=kind)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not categories:
        click.echo("No categories found. Run 'init-categories' to create default categories.")
        return

    heading("Categories:", preferences)
    for cat in categories:
        click.echo(f"{cat.id:>5}  {cat.name:<20} {cat.kind.value:<8} {cat.color}  {cat.icon}")


@category_group.command("create")
@click.argument("name")
@click.option("--type", "kind", type=KIND_CHOICE, default="expense", help="Category type (default: expense)")
@click.option("--color", help="Hex display color (default: #6366f1)")
@click.option("--icon", help="Icon identifier (default: circle)")
@click.pass_context
def create_category(ctx, name: str, kind: str, color: str | None, icon: str | None):
    """Create a new category."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        category_id = service.create_category(name=name, kind=kind, color=color, icon=icon)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Created {kind.lower()} category '{name}' (ID: {category_id})")


@category_group.command("update")
@click.argument("category_id", type=int)
@click.option("--name", help="New name")
@click.option("--type", "kind", type=KIND_CHOICE, help="New type")
@click.option("--color", help="New hex display color")
@click.option("--icon", help="New icon identifier")
@click.pass_context
def update_category(
    ctx, category_id: int, name: str | None, kind: str | None, color: str | None, icon: str | None
):
    """Update a category. Omitted fields keep their current value."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        current = service.require_category(category_id)
        service.update_category(
            category_id,
            name=name if name is not None else current.name,
            kind=kind if kind is not None else current.kind,
            color=color if color is not None else current.color,
            icon=icon if icon is not None else current.icon,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Updated category {category_id}")


@category_group.command("delete")
@click.argument("category_id", type=int)
@click.confirmation_option(prompt="Are you sure you want to delete this category?")
@click.pass_context
def delete_category(ctx, category_id: int):
    """Delete a category.

    Categories with transactions cannot be deleted. Bill reminders in the
    category are kept without a category; its budgets are removed.
    """
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        service.delete_category(category_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted category {category_id}")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
