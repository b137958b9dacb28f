"""Doubles CLI commands.

Each command module contains the business logic for a CLI command.
The cli.py module handles Typer options and argument parsing,
then delegates to these command functions.
"""

from doubles.commands.classify import classify_command
from doubles.commands.describe import describe_command
from doubles.commands.init import init_command
from doubles.commands.table import table_command

__all__ = [
    "classify_command",
    "describe_command",
    "init_command",
    "table_command",
]
