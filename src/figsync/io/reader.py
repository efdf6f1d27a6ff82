"""Snapshot reader for loading captured documents.

This module provides the SnapshotReader class for loading a document
snapshot JSON file and turning it into a SnapshotHost.

Snapshot layout::

    {
      "fileKey": "abc123",
      "document": {"id": "0:0", "type": "DOCUMENT", "name": "...", "children": [...]},
      "selection": ["12:4"],
      "styles": {"paint": [...], "text": [...], "effect": [...]}
    }
"""

import json
from pathlib import Path
from typing import Any

from figsync.exceptions import SnapshotFormatError, SnapshotLoadError
from figsync.host.snapshot import SnapshotHost
from figsync.io.converter import (
    effect_style_from_snapshot,
    node_from_snapshot,
    paint_style_from_snapshot,
    text_style_from_snapshot,
)


class SnapshotReader:
    """Loads document snapshots.

    Example:
        reader = SnapshotReader(Path("design-snapshot.json"))
        reader.load()
        host = reader.to_host()
    """

    def __init__(self, snapshot_path: Path) -> None:
        """Initialize the snapshot reader.

        Args:
            snapshot_path: Path to the snapshot JSON file
        """
        self._snapshot_path = snapshot_path
        self._data: dict[str, Any] | None = None

    def load(self) -> None:
        """Load and validate the snapshot file.

        Raises:
            SnapshotLoadError: If the file is missing or is not valid JSON
            SnapshotFormatError: If the JSON lacks a document tree
        """
        path = str(self._snapshot_path)
        if not self._snapshot_path.exists():
            raise SnapshotLoadError(path, "file not found")

        try:
            with open(self._snapshot_path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise SnapshotLoadError(path, str(e)) from e

        if not isinstance(data, dict):
            raise SnapshotFormatError(path, "top level must be a JSON object")
        document = data.get("document")
        if not isinstance(document, dict) or "id" not in document:
            raise SnapshotFormatError(path, "missing 'document' node with an 'id'")
        styles = data.get("styles", {})
        if not isinstance(styles, dict):
            raise SnapshotFormatError(path, "'styles' must be an object")

        self._data = data

    @property
    def data(self) -> dict[str, Any]:
        """Raw snapshot content.

        Raises:
            RuntimeError: If the snapshot has not been loaded yet
        """
        if self._data is None:
            raise RuntimeError("Snapshot not loaded. Call load() first.")
        return self._data

    def to_host(self) -> SnapshotHost:
        """Build a host serving the loaded snapshot.

        Raises:
            RuntimeError: If the snapshot has not been loaded yet
            SnapshotFormatError: If a node or style entry is malformed
        """
        data = self.data
        styles = data.get("styles", {})
        try:
            return SnapshotHost(
                root=node_from_snapshot(data["document"]),
                file_key=data.get("fileKey"),
                selection_ids=list(data.get("selection", [])),
                paint_styles=[paint_style_from_snapshot(s) for s in styles.get("paint", [])],
                text_styles=[text_style_from_snapshot(s) for s in styles.get("text", [])],
                effect_styles=[effect_style_from_snapshot(s) for s in styles.get("effect", [])],
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise SnapshotFormatError(str(self._snapshot_path), f"malformed entry: {e}") from e


def load_snapshot(snapshot_path: Path) -> SnapshotHost:
    """Load a snapshot file into a SnapshotHost."""
    reader = SnapshotReader(snapshot_path)
    reader.load()
    return reader.to_host()
