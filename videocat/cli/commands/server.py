"""Server commands."""

import cyclopts
import uvicorn

from videocat.cli.console import get_console

app = cyclopts.App(name="server", help="Run the HTTP service")

APP_IMPORT_PATH = "videocat.application.api.rest.app:app"


@app.command
def run(
    host: str = "127.0.0.1",
    port: int = 8000,
    reload: bool = False,
) -> None:
    """Run the server in the foreground.

    Args:
        host: Host to bind to.
        port: Port to listen on.
        reload: Restart on source changes (development only).
    """
    console = get_console()
    console.success(f"Serving on http://{host}:{port}")
    uvicorn.run(APP_IMPORT_PATH, host=host, port=port, reload=reload)
