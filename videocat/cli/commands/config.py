"""Config management commands."""

import sys
from pathlib import Path

import cyclopts

from videocat.cli.console import get_console
from videocat.config import Config

app = cyclopts.App(name="config", help="Inspect and create videocat configuration")

TEMPLATE = """\
# videocat configuration
# Point VIDEOCAT_CONFIG_FILE at this file; environment variables
# (VIDEOCAT_<SECTION>__<KEY>) take precedence.

server:
  name: "Video Catalogue"
  version: "1.0"

paths:
  videos: /videos
  testing:
    - /testing/all-data
    - /__test__/data

videos:
  max_age_restriction: 18
  publication_offset_hours: 24

# logging:
#   level: "INFO"
"""

DEFAULT_CONFIG_NAME = "videocat.yaml"


@app.command
def init(path: Path = Path(DEFAULT_CONFIG_NAME)) -> None:
    """Create a new config file from template.

    Args:
        path: Path for the config file. Defaults to ./videocat.yaml
    """
    console = get_console()
    if path.is_dir():
        console.error(f"{path} is a directory, not a file path")
        sys.exit(1)

    if path.exists():
        console.error(f"{path} already exists (refusing to overwrite)")
        sys.exit(1)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(TEMPLATE)
    console.success(f"Created config at {path}")
    console.print(f"  export VIDEOCAT_CONFIG_FILE={path.resolve()}")


@app.command
def show() -> None:
    """Print the effective configuration."""
    get_console().settings(Config().model_dump(mode="json"), title="videocat configuration")
