"""Global test fixtures."""

import os

import logfire

# Keep logfire local before any test module imports the app
# This must happen at module load time, not in a fixture
os.environ.setdefault("VIDEOCAT_LOGFIRE__SEND_TO_LOGFIRE", "false")
os.environ.setdefault("VIDEOCAT_LOGGING__LEVEL", "WARNING")

logfire.configure(send_to_logfire=False, console=False)
