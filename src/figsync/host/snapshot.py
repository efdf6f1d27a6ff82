"""In-memory host over a loaded document tree.

SnapshotHost serves queries from a node tree and style registry that were
captured ahead of time (see figsync.io.reader), so exports can run outside
the design application.
"""

import structlog

from figsync.domain.nodes import EffectStyle, PaintStyle, SceneNode, SharedStyle, TextStyle
from figsync.exceptions import HostQueryError
from figsync.host.base import DesignHost

logger = structlog.get_logger(__name__)


class SnapshotHost(DesignHost):
    """Host backed by an in-memory document snapshot.

    Example:
        host = SnapshotHost(root=document, file_key="abc123")
        styles = await host.get_local_paint_styles()
    """

    def __init__(
        self,
        root: SceneNode,
        file_key: str | None = None,
        selection_ids: list[str] | None = None,
        paint_styles: list[PaintStyle] | None = None,
        text_styles: list[TextStyle] | None = None,
        effect_styles: list[EffectStyle] | None = None,
    ) -> None:
        """Initialize the host.

        Args:
            root: Document root node
            file_key: Source document identifier
            selection_ids: Node ids selected on the current page
            paint_styles: Shared paint styles, in registry order
            text_styles: Shared text styles, in registry order
            effect_styles: Shared effect styles, in registry order
        """
        self._root = root
        self._file_key = file_key
        self._selection_ids = list(selection_ids or [])
        self._paint_styles = list(paint_styles or [])
        self._text_styles = list(text_styles or [])
        self._effect_styles = list(effect_styles or [])
        self._nodes: dict[str, SceneNode] = {root.id: root}
        for node in root.iter_descendants():
            self._nodes[node.id] = node
        self._styles: dict[str, SharedStyle] = {
            style.id: style
            for style in (*self._paint_styles, *self._text_styles, *self._effect_styles)
        }
        self._closed = False

    @property
    def root(self) -> SceneNode:
        return self._root

    @property
    def file_key(self) -> str | None:
        return self._file_key

    @property
    def closed(self) -> bool:
        """Whether close() has been called."""
        return self._closed

    def current_selection(self) -> list[SceneNode]:
        self._check_open("current_selection")
        selection = []
        for node_id in self._selection_ids:
            node = self._nodes.get(node_id)
            if node is None:
                logger.warning("Selected node not found in snapshot", node_id=node_id)
                continue
            selection.append(node)
        return selection

    def get_node_by_id(self, node_id: str) -> SceneNode | None:
        self._check_open("get_node_by_id")
        return self._nodes.get(node_id)

    def get_style_by_id(self, style_id: str) -> SharedStyle | None:
        self._check_open("get_style_by_id")
        return self._styles.get(style_id)

    async def get_local_paint_styles(self) -> list[PaintStyle]:
        self._check_open("get_local_paint_styles")
        return list(self._paint_styles)

    async def get_local_text_styles(self) -> list[TextStyle]:
        self._check_open("get_local_text_styles")
        return list(self._text_styles)

    async def get_local_effect_styles(self) -> list[EffectStyle]:
        self._check_open("get_local_effect_styles")
        return list(self._effect_styles)

    def close(self) -> None:
        self._closed = True

    def _check_open(self, query: str) -> None:
        if self._closed:
            raise HostQueryError(query, "host session is closed")
