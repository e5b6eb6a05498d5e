"""Loading of JSON enclosure configuration files.

File system problems, malformed JSON and schema violations all surface as
``ConfigError`` with an ``error_type`` naming the category, so the CLI can
report them uniformly.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from enclosures.application.config.schemas import EnclosureConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message.
        error_type: One of file_not_found, permission_denied, file_read_error,
            json_parse or validation.
        path: Path to the configuration file, if loaded from disk.
        details: Per-problem details (JSON path and message for validation
            errors, line and column for parse errors).
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a Pydantic error location as a JSON path.

    Examples:
        >>> _format_json_path(("enclosure", "width"))
        'enclosure.width'
        >>> _format_json_path(("accessories", 0, "length"))
        'accessories[0].length'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        value = detail.get("value")
        suffix = f" (got: {value!r})" if value is not None and not isinstance(value, dict) else ""
        lines.append(f"  - {detail['path'] or '<root>'}: {detail['message']}{suffix}")
    return "\n".join(lines)


def _validate(data: Any, path: Path | None) -> EnclosureConfiguration:
    try:
        return EnclosureConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        raise ConfigError(
            message=_validation_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> EnclosureConfiguration:
    """Load and validate an enclosure configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file.

    Returns:
        A validated EnclosureConfiguration.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in config file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    config = _validate(data, path)
    logger.debug(f"Loaded configuration from {path}")
    return config


def load_config_from_dict(data: dict[str, Any]) -> EnclosureConfiguration:
    """Validate an enclosure configuration held in a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data, None)
