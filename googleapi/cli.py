from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from googleapi.exceptions import GoogleAPIError
from googleapi.media import round_chunk_size
from googleapi.resolve import resolve_relative
from googleapi.response import parse_error
from googleapi.uritemplates import expand

console = Console()
err_console = Console(stderr=True)
app = typer.Typer(
    name='googleapi',
    help='Inspect how generated API clients build URLs and report errors',
    no_args_is_help=True,
)


def _parse_values(values: list[str]) -> dict[str, str]:
    parsed = {}
    for item in values:
        name, sep, value = item.partition('=')
        if not sep:
            raise typer.BadParameter(f'expected NAME=VALUE, got {item!r}')
        parsed[name] = value
    return parsed


@app.command('expand')
def expand_command(
    template: Annotated[str, typer.Argument(help='Path template to expand')],
    value: Annotated[
        list[str] | None,
        typer.Option('--value', '-v', help='Placeholder value as NAME=VALUE'),
    ] = None,
) -> None:
    """Expand the placeholders of a path template.

    Examples:
        googleapi expand '/b/{bucket}/o/{object}' -v bucket=b1 -v object='a b'
        googleapi expand '/v1/{+name}:cancel' -v name=operations/123
    """
    expanded = expand(template, _parse_values(value or []))
    console.print(expanded, markup=False, emoji=False, soft_wrap=True)


@app.command('resolve')
def resolve_command(
    base: Annotated[str, typer.Argument(help='Absolute base URL')],
    rel: Annotated[str, typer.Argument(help='Relative, possibly templated path')],
) -> None:
    """Resolve a templated path against a base URL."""
    try:
        resolved = resolve_relative(base, rel)
        console.print(resolved, markup=False, emoji=False, soft_wrap=True)
    except GoogleAPIError as e:
        err_console.print(f'[red]Error:[/red] {escape(e.message)}')
        raise typer.Exit(1)


@app.command('check')
def check_command(
    status: Annotated[int, typer.Argument(help='HTTP status code')],
    body_file: Annotated[
        Path | None,
        typer.Argument(help='File holding the response body', exists=True, dir_okay=False),
    ] = None,
) -> None:
    """Show the error a generated client reports for a response."""
    body = body_file.read_bytes() if body_file else b''
    err = parse_error(status, None, body)
    if err is None:
        console.print('[green]OK[/green]')
        return
    console.print(str(err), markup=False, emoji=False, soft_wrap=True)
    raise typer.Exit(1)


@app.command('chunk-size')
def chunk_size_command(
    size: Annotated[int, typer.Argument(help='Requested chunk size in bytes')],
) -> None:
    """Show the upload chunk size actually used for a requested size."""
    try:
        console.print(round_chunk_size(size))
    except GoogleAPIError as e:
        err_console.print(f'[red]Error:[/red] {escape(e.message)}')
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show the version of googleapi."""
    from googleapi._version import version

    console.print(f'googleapi version: {version}')


if __name__ == '__main__':
    app()
