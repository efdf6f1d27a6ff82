"""Design document hosts for figsync.

A host owns the document tree and shared style registry and answers the
queries the export engine makes.

Key classes:
- DesignHost: Abstract query interface
- SnapshotHost: In-memory host over a captured snapshot
- RestHost: Host over a file fetched from the Figma REST API
"""

from figsync.host.base import DesignHost
from figsync.host.rest import FigmaAPIClient, RestHost
from figsync.host.snapshot import SnapshotHost

__all__ = [
    "DesignHost",
    "FigmaAPIClient",
    "RestHost",
    "SnapshotHost",
]
