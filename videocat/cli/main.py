"""Main CLI application using Cyclopts."""

import cyclopts

from videocat.cli.commands import config, server

app = cyclopts.App(
    name="videocat",
    help="Video catalogue service - CLI",
)

app.command(server.app, name="server")
app.command(config.app, name="config")


def main() -> None:
    app()
