"""trellis-conf CLI module.

Components:
- main: typer application with the check, dump and format commands
"""

from trellis_conf.cli.main import app, setup_logger

__all__ = ["app", "setup_logger"]
