"""CLI framework for catalogfetch."""
from __future__ import annotations

from catalogfetch.cli.app import ExitCode
from catalogfetch.cli.app import app
from catalogfetch.cli.app import run_app

__all__ = ["app", "run_app", "ExitCode"]
