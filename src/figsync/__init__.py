"""figsync - Snapshot design components and styles into a versioned JSON export.

figsync walks a design document's node tree (components, component sets,
shared paint/text/effect styles), normalizes colors, geometry, layout and
typography into a fixed schema, and writes a deterministic export document
that code generators and diff tools can consume.

Example:
    $ figsync export design-snapshot.json -o figma-export.json

This will write figma-export.json containing every component, component set
and shared style found in the snapshot.
"""

__version__ = "0.1.0"

EXPORT_FORMAT_VERSION = "1.0"

__all__ = ["EXPORT_FORMAT_VERSION", "__version__"]
