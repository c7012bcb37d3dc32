import typer
from dotenv import load_dotenv

from .._version import __version__
from .config import app as config_app
from .scan import digits_command, find_command, ints_command


__all__ = ["app", "run"]


app = typer.Typer(help="Scan text for digits, integers and literal substrings", add_completion=False)


@app.callback(invoke_without_command=True)
def version_callback(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show textscan version and exit", is_eager=True),
) -> None:
    """Handle global options before any sub-command executes."""

    if version:
        typer.echo(f"textscan {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


app.command("digits", help="Extract single digits.")(digits_command)
app.command("ints", help="Extract integers from runs of consecutive digits.")(ints_command)
app.command("find", help="Locate overlapping occurrences of literal patterns.")(find_command)
app.add_typer(config_app, name="config")


def run() -> None:
    load_dotenv()
    app()


if __name__ == "__main__":
    run()
