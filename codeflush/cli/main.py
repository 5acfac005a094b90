"""codeflush CLI - build and send requests from the command line."""
import logging
from typing import List, Optional, Tuple

import requests
import typer
from rich.console import Console
from rich.table import Table

from codeflush import (
    ClientConfig,
    ConfigurationError,
    Endpoint,
    JSONParser,
    Request,
    RequestBody,
    RequestBuilderWithBody,
    RequestMethod,
    RequestsHTTPClient,
    TextParser,
    setup_logging,
)

app = typer.Typer(
    name="codeflush",
    help="Build and send HTTP requests",
    add_completion=False
)
console = Console()


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log request details"),
):
    """Build and send HTTP requests."""
    setup_logging(logging.DEBUG if verbose else ClientConfig.default().log_level)


def parse_parameter(raw: str) -> Tuple[str, Optional[str]]:
    """Split 'key=value' into its parts; a plain 'key' has no value."""
    if '=' in raw:
        key, value = raw.split('=', 1)
        return key, value
    return raw, None


def parse_header(raw: str) -> Tuple[str, str]:
    """Split 'Name: value' into its parts."""
    if ':' not in raw:
        raise typer.BadParameter(f"expected 'Name: value', got {raw!r}", param_hint="--header")
    name, value = raw.split(':', 1)
    return name.strip(), value.strip()


def build_request(method: str, url: str, params: List[str], headers: List[str],
                  charset: Optional[str], data: Optional[str] = None) -> Request:
    try:
        request_method = RequestMethod.parse(method)
    except ValueError:
        raise typer.BadParameter(f"unknown method {method!r}", param_hint="METHOD")

    builder = Endpoint.for_url(url).request(request_method)
    if charset:
        builder.charset(charset)
    for raw in params:
        builder.parameter(*parse_parameter(raw))
    for raw in headers:
        builder.header(*parse_header(raw))

    if data is not None:
        if not isinstance(builder, RequestBuilderWithBody):
            raise typer.BadParameter(f"{request_method.value} requests cannot carry a body",
                                     param_hint="--data")
        builder.body(RequestBody.for_text(data))

    return builder.build()


@app.command()
def url(
    method: str = typer.Argument(..., help="HTTP method"),
    base_url: str = typer.Argument(..., help="Endpoint URL"),
    param: List[str] = typer.Option([], "--param", "-p", help="Query parameter, key=value or key"),
    header: List[str] = typer.Option([], "--header", "-H", help="Header, 'Name: value'"),
    charset: Optional[str] = typer.Option(None, "--charset", "-c", help="Percent-encoding charset"),
):
    """Print the URL a request would be sent to."""
    try:
        request = build_request(method, base_url, param, header, charset)
        console.print(request.request_url, highlight=False, markup=False, soft_wrap=True)
    except ConfigurationError as e:
        console.print(f"[red]Invalid request: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def send(
    method: str = typer.Argument(..., help="HTTP method"),
    base_url: str = typer.Argument(..., help="Endpoint URL"),
    param: List[str] = typer.Option([], "--param", "-p", help="Query parameter, key=value or key"),
    header: List[str] = typer.Option([], "--header", "-H", help="Header, 'Name: value'"),
    charset: Optional[str] = typer.Option(None, "--charset", "-c", help="Percent-encoding charset"),
    data: Optional[str] = typer.Option(None, "--data", "-d", help="Text request body"),
    as_json: bool = typer.Option(False, "--json", help="Parse the response body as JSON"),
    show_headers: bool = typer.Option(False, "-i", "--include", help="Show response headers"),
):
    """Send a request and print the response."""
    try:
        request = build_request(method, base_url, param, header, charset, data)
        parser = JSONParser() if as_json else TextParser()
        with RequestsHTTPClient() as client:
            response = request.execute(client, parser)
    except ConfigurationError as e:
        console.print(f"[red]Invalid request: {e}[/red]")
        raise typer.Exit(1)
    except requests.RequestException as e:
        console.print(f"[red]Request failed: {e}[/red]")
        raise typer.Exit(1)

    color = "green" if response.is_success else "red"
    console.print(f"[{color}]{response.status_code}[/{color}] {request.method.value} {request.request_url}",
                  highlight=False)

    if show_headers:
        table = Table()
        table.add_column("Header", style="cyan")
        table.add_column("Value")
        for name, value in response.headers.items():
            table.add_row(name, value)
        console.print(table)

    if as_json:
        if response.body is not None:
            console.print_json(data=response.body)
    elif response.body:
        console.print(response.body, highlight=False, markup=False)

    if not response.is_success:
        raise typer.Exit(1)


def main():
    """Entry point for the codeflush command."""
    app()


if __name__ == "__main__":
    main()
