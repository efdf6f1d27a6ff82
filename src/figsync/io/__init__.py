"""Snapshot and export I/O for figsync.

This module handles reading captured document snapshots and writing export
documents. It keeps file formats out of the core extraction code.

Key responsibilities:
- Load snapshot JSON into a SnapshotHost
- Convert snapshot and REST node JSON to domain nodes
- Write export documents as JSON

Key classes:
- SnapshotReader: Load snapshots
- ExportWriter: Save export documents
"""

from figsync.io.reader import SnapshotReader, load_snapshot
from figsync.io.writer import ExportWriter, render_document

__all__ = [
    "ExportWriter",
    "SnapshotReader",
    "load_snapshot",
    "render_document",
]
