"""
CLI tool for checking author profile values.

Provides commands for validating a complete author, previewing text
normalization, and listing the storage column limits.
"""

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from author_profile.constants import AUTHOR_COLUMNS, AUTHOR_TEXT_LIMITS
from author_profile.exceptions import ValidationError
from author_profile.logging import set_log_context
from author_profile.models.author import Author
from author_profile.sanitize import sanitize_text

typer_app = typer.Typer(
    name="author-profile",
    help="Author Profile CLI - Validate author profile values",
    add_completion=False,
)
console = Console()


@typer_app.command()
def validate(
    author_id: str = typer.Argument(..., help="Author ID (UUID)"),
    avatar_url: str = typer.Argument(..., help="Avatar URL"),
    activation_token: str = typer.Argument(..., help="Activation token"),
    email: str = typer.Argument(..., help="Email address"),
    password_hash: str = typer.Argument(..., help="Password hash"),
    username: str = typer.Argument(..., help="User name"),
):
    """
    Build an author from the given values and print it as JSON.

    Exits with code 1 and names the offending field when a value is
    rejected.

    Example:
        author-profile validate d441c4d8-efd0-4898-876a-1c39f94dc197 \\
            www.google.com abcdefghijklmnopqrstuvwxyzabcdef \\
            test@test.com "$HASH" Testuser
    """
    set_log_context(cli_command="validate")
    try:
        author = Author(
            author_id, avatar_url, activation_token, email, password_hash, username
        )
    except ValidationError as ex:
        console.print(f"[red]✗ {ex.field}:[/red] {escape(ex.message)}")
        raise typer.Exit(code=1)

    console.print_json(str(author))


@typer_app.command()
def sanitize(text: str = typer.Argument(..., help="Text to normalize")):
    """
    Print text as it would be stored in an author text field.

    Exits with code 1 when nothing is left after normalization.
    """
    set_log_context(cli_command="sanitize")
    cleaned = sanitize_text(text)
    if not cleaned:
        console.print("[red]✗ value is empty or insecure[/red]")
        raise typer.Exit(code=1)

    typer.echo(cleaned)


@typer_app.command()
def limits():
    """Display the storage column and maximum length of every field."""
    table = Table(
        "Field",
        "Column",
        "Max length",
        title="Author table",
    )
    for field, column in AUTHOR_COLUMNS.items():
        max_length = AUTHOR_TEXT_LIMITS.get(field)
        table.add_row(
            field,
            column,
            str(max_length) if max_length is not None else "16 bytes (UUID)",
        )

    console.print(table)


def main() -> None:
    typer_app()


if __name__ == "__main__":
    main()
