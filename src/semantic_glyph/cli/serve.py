"""Run the HTTP API or the MCP server in the foreground."""

from enum import Enum
from typing import Annotated

import typer
from rich.console import Console

from semantic_glyph.config import get_settings

serve_app = typer.Typer(help="Serve the note tools over HTTP or MCP.")
# Stdout belongs to the MCP stdio transport.
console = Console(stderr=True)

HostOption = Annotated[str, typer.Option(help="Interface to bind.")]


class McpTransport(str, Enum):
    STDIO = "stdio"
    SSE = "sse"
    STREAMABLE_HTTP = "streamable-http"


@serve_app.command("api")
def api(
    host: HostOption = "127.0.0.1",
    port: Annotated[int, typer.Option(help="Port to listen on.")] = 8000,
) -> None:
    """Serve the REST API with uvicorn."""
    import uvicorn

    from semantic_glyph.api.app import create_app

    settings = get_settings()
    console.print(f"[green]Semantic Glyph API on http://{host}:{port}[/green]")
    uvicorn.run(create_app(), host=host, port=port, log_level=settings.log_level.lower())


@serve_app.command("mcp")
def mcp(
    transport: Annotated[McpTransport, typer.Option(help="MCP transport.")] = McpTransport.STDIO,
    host: HostOption = "127.0.0.1",
    port: Annotated[int, typer.Option(help="Port for the sse and streamable-http transports.")] = 8002,
) -> None:
    """Serve the note tools to MCP clients."""
    from semantic_glyph.mcp.server import create_mcp_server

    server = create_mcp_server(get_settings())
    if transport is McpTransport.STDIO:
        console.print("[green]MCP server on stdio[/green]")
        server.run(transport="stdio")
        return
    console.print(f"[green]MCP server ({transport.value}) on http://{host}:{port}[/green]")
    server.run(transport=transport.value, host=host, port=port)  # type: ignore[arg-type]
