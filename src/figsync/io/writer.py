"""Export writer for persisting export documents.

This module provides the ExportWriter class for writing an ExportDocument
as JSON to a file or stream.
"""

import json
from pathlib import Path
from typing import TextIO

from figsync.domain.records import ExportDocument
from figsync.exceptions import ExportWriteError

DEFAULT_EXPORT_NAME = "figma-export.json"


def render_document(document: ExportDocument, indent: int | None = 2, ensure_ascii: bool = False) -> str:
    """Serialize an export document to JSON text.

    Key order follows the record definitions so that repeated exports of an
    unchanged document differ only in ``exportedAt``.
    """
    return json.dumps(document.to_dict(), indent=indent, ensure_ascii=ensure_ascii)


class ExportWriter:
    """Writes export documents to disk.

    Example:
        writer = ExportWriter(Path("figma-export.json"))
        writer.write(document)
    """

    def __init__(self, output_path: Path, indent: int | None = 2, ensure_ascii: bool = False) -> None:
        """Initialize the writer.

        Args:
            output_path: Destination file
            indent: JSON indentation (None for compact output)
            ensure_ascii: Escape non-ASCII characters
        """
        self.output_path = output_path
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def write(self, document: ExportDocument) -> Path:
        """Write the document, creating parent directories as needed.

        Returns:
            Path of the written file

        Raises:
            ExportWriteError: If the file cannot be written
        """
        text = render_document(document, self.indent, self.ensure_ascii)
        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            self.output_path.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            raise ExportWriteError(str(self.output_path), str(e)) from e
        return self.output_path

    def write_stream(self, document: ExportDocument, stream: TextIO) -> None:
        """Write the document to an open text stream."""
        stream.write(render_document(document, self.indent, self.ensure_ascii))
        stream.write("\n")

    @staticmethod
    def get_default_path(directory: Path) -> Path:
        """Get the default export path inside a directory."""
        return directory / DEFAULT_EXPORT_NAME
