"""Profile commands."""

import click
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.errors import DomainError
from fintrack.domain.profile import ProfileService


@click.group()
def profile_group():
    """Show or change your profile."""
    pass


@profile_group.command("show")
@click.pass_context
def show_profile(ctx):
    """Show profile and preferences."""
    db = ctx.obj["db"]
    try:
        profile = ProfileService(db).get_profile()
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"User:      {profile.id}")
    click.echo(f"Name:      {profile.full_name or '(not set)'}")
    click.echo(f"Currency:  {profile.currency}")
    click.echo(f"Theme:     {'dark' if profile.dark_mode else 'light'}")


@profile_group.command("set")
@click.option("--name", "full_name", help="Full name")
@click.option("--currency", help="Preferred currency label (e.g., USD)")
@click.option("--dark-mode/--light-mode", "dark_mode", default=None, help="Terminal theme")
@click.pass_context
def set_profile(ctx, full_name: str | None, currency: str | None, dark_mode: bool | None):
    """Update profile fields."""
    db = ctx.obj["db"]
    service = ProfileService(db)

    if full_name is None and currency is None and dark_mode is None:
        click.echo("Error: Nothing to update. Use --name, --currency or --dark-mode/--light-mode.", err=True)
        ctx.exit(1)

    try:
        profile = service.update_profile(
            full_name=full_name, currency=currency, dark_mode=dark_mode
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo("Profile updated successfully!")
    click.echo(f"  Name: {profile.full_name or '(not set)'}")
    click.echo(f"  Currency: {profile.currency}")
    click.echo(f"  Theme: {'dark' if profile.dark_mode else 'light'}")


def register_commands(cli):
    """Register profile commands with main CLI."""
    cli.add_command(profile_group, name="profile")
