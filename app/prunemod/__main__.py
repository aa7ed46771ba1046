"""Allow running prunemod as ``python -m prunemod``."""

from prunemod.cli.main import app

app()
