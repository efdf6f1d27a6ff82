"""Export orchestration.

An export runs as three explicit stages:

1. Build: select the component nodes for the requested scope and convert
   them to records (synchronous, no host suspension).
2. Styles: await the three shared-style enumerations.
3. Assemble: wrap components and styles into a versioned ExportDocument.

Each export reads the host tree fresh; nothing is carried between exports.
"""

import time
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from enum import Enum

from figsync.core.component import ComponentExporter
from figsync.core.styles import StyleCollectionExporter
from figsync.domain.nodes import NodeType, SceneNode
from figsync.domain.records import ComponentRecord, ExportDocument, FileInfo, StyleCollection
from figsync.exceptions import InvalidScopeError
from figsync.host.base import DesignHost
from figsync.utils.logging import ExportLogger

UNKNOWN_FILE_KEY = "unknown"


class ExportScope(str, Enum):
    """Which part of the document an export covers."""

    DOCUMENT = "document"
    SELECTION = "selection"
    TOKENS = "tokens"

    @classmethod
    def parse(cls, value: "str | ExportScope | None") -> "ExportScope":
        """Parse a scope selector; None means the whole document.

        Raises:
            InvalidScopeError: If the selector is not a known scope
        """
        if value is None:
            return cls.DOCUMENT
        try:
            return cls(value)
        except ValueError:
            raise InvalidScopeError(str(value)) from None


def format_timestamp(moment: datetime) -> str:
    """Format a UTC timestamp as ISO-8601 with milliseconds and a Z suffix."""
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.") + (
        f"{moment.microsecond // 1000:03d}Z"
    )


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def top_level_components(nodes: Iterable[SceneNode]) -> list[SceneNode]:
    """Keep component sets and components that are not members of a set.

    Args:
        nodes: Candidate nodes in document order

    Returns:
        Exportable nodes; variant members are represented by their set
    """
    return [node for node in nodes if node.is_component_like() and not node.is_variant()]


def find_components(container: SceneNode) -> list[SceneNode]:
    """Find every component and component set below a node, in document order."""
    return container.find_all(lambda node: node.is_component_like())


class ExportOrchestrator:
    """Selects nodes per scope and assembles export documents.

    Example:
        orchestrator = ExportOrchestrator(host)
        document = await orchestrator.export(ExportScope.SELECTION)
    """

    CONTAINER_TYPES = (NodeType.FRAME, NodeType.GROUP)

    def __init__(
        self,
        host: DesignHost,
        export_logger: ExportLogger | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            host: Host to read the document from
            export_logger: Logger collecting export statistics
            clock: Source of the export timestamp
        """
        self.host = host
        self.export_logger = export_logger if export_logger is not None else ExportLogger()
        self.clock = clock
        self.component_exporter = ComponentExporter(host, self.export_logger)
        self.style_exporter = StyleCollectionExporter(host, self.export_logger)

    def select_nodes(self, scope: ExportScope) -> list[SceneNode]:
        """Select the component nodes an export of the given scope covers."""
        if scope is ExportScope.TOKENS:
            return []

        if scope is ExportScope.DOCUMENT:
            return top_level_components(find_components(self.host.root))

        selected: list[SceneNode] = []
        for node in self.host.current_selection():
            if node.is_component_like():
                selected.append(node)
            elif node.type in self.CONTAINER_TYPES:
                selected.extend(top_level_components(find_components(node)))
        return selected

    def build_components(self, scope: ExportScope) -> list[ComponentRecord]:
        """Stage 1: convert the scope's component nodes to records."""
        return [self.component_exporter.export(node) for node in self.select_nodes(scope)]

    def assemble(self, components: list[ComponentRecord], styles: StyleCollection) -> ExportDocument:
        """Stage 3: wrap records into a versioned export document."""
        return ExportDocument(
            file_key=self.host.file_key or UNKNOWN_FILE_KEY,
            file_name=self.host.document_name,
            exported_at=format_timestamp(self.clock()),
            components=components,
            styles=styles,
        )

    async def export(self, scope: "ExportScope | str | None" = None) -> ExportDocument:
        """Run a full export.

        Args:
            scope: Export scope (default: whole document)

        Returns:
            ExportDocument

        Raises:
            InvalidScopeError: If the scope is unknown
            HostQueryError: If a host query fails
        """
        scope = ExportScope.parse(scope)
        stats = self.export_logger.stats
        stats.start_time = time.time()

        components = self.build_components(scope)
        styles = await self.style_exporter.collect()
        document = self.assemble(components, styles)

        stats.end_time = time.time()
        return document

    async def info(self) -> FileInfo:
        """Collect document-level counts without building any records."""
        root = self.host.root
        component_count = len(top_level_components(find_components(root)))
        paint_styles, text_styles, effect_styles = await self.style_exporter.fetch()

        return FileInfo(
            file_name=self.host.document_name,
            file_key=self.host.file_key or UNKNOWN_FILE_KEY,
            page_count=len(root.children),
            component_count=component_count,
            color_style_count=len(paint_styles),
            text_style_count=len(text_styles),
            effect_style_count=len(effect_styles),
            selection_count=len(self.host.current_selection()),
        )
