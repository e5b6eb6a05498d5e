"""CLI command implementations for the enclosures application.

- generate: Generate the panel net document(s)
- summary: Show the panel table
- validate: Validate a configuration file
"""

from enclosures.cli.commands.generate import generate_command, summary_command
from enclosures.cli.commands.validate import validate_command

__all__ = ["generate_command", "summary_command", "validate_command"]
