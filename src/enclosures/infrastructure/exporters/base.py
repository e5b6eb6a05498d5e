"""Exporter framework: Protocol, Registry and Manager.

Every exporter turns a PanelNetOutput into one document. Exporters are
looked up by format name so the CLI and ExportManager never import a
concrete exporter directly.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from enclosures.application.dtos import PanelNetOutput
    from enclosures.domain import PanelDocument


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Attributes:
        format_name: Registry key of the format (e.g. "svg").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export_string(self, output: PanelNetOutput) -> str:
        """Serialize the whole sheet.

        Args:
            output: The generated panel net.

        Returns:
            The document text.
        """
        ...

    @abstractmethod
    def emit(self, document: PanelDocument, scale: float) -> str:
        """Serialize a single panel at its local origin.

        Args:
            document: Panel to serialize.
            scale: Drawing units per inch.
        """
        ...

    def export(self, output: PanelNetOutput, path: Path) -> None:
        """Write the whole sheet to a file.

        Args:
            output: The generated panel net.
            path: Destination file.
        """
        ...


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves with the ``@ExporterRegistry.register``
    decorator.

    Example:
        @ExporterRegistry.register("svg")
        class SvgExporter:
            format_name = "svg"
            file_extension = "svg"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Decorator to register an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        """Sorted list of registered format names."""
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Writes a panel net to one file per requested format.

    Attributes:
        output_dir: Directory where exported files are saved.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: PanelNetOutput,
        project_name: str = "enclosure",
    ) -> dict[str, Path]:
        """Export to several formats.

        Files are named ``{project_name}_{format}.{ext}``.

        Args:
            formats: Format names to export.
            output: The generated panel net.
            project_name: Base name for output files.

        Returns:
            Mapping of format name to written file path.

        Raises:
            KeyError: If any format is not registered. Nothing is written
                in that case.
            OSError: If file operations fail.
        """
        exporters = {name: ExporterRegistry.get(name)() for name in formats}
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name, exporter in exporters.items():
            filepath = self.output_dir / f"{project_name}_{format_name}.{exporter.file_extension}"
            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(output, filepath)
            results[format_name] = filepath
        return results

    def export_single(
        self,
        format_name: str,
        output: PanelNetOutput,
        project_name: str = "enclosure",
    ) -> Path:
        """Export to a single format and return the written path."""
        return self.export_all([format_name], output, project_name)[format_name]
