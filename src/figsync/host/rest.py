"""Host backed by the Figma REST API.

RestHost loads a file through ``GET /v1/files/:key`` and serves the export
engine's queries from the converted node tree. Shared style definitions are
fetched lazily through ``GET /v1/files/:key/nodes`` the first time a style
enumeration is awaited. Enumerations awaited together share that one
request, and a failed request is reported to each of them without being
repeated.
"""

import asyncio
from typing import Any

import requests
import structlog

from figsync.domain.nodes import (
    EffectStyle,
    NodeType,
    PaintStyle,
    SceneNode,
    SharedStyle,
    TextStyle,
)
from figsync.exceptions import HostQueryError
from figsync.host.base import DesignHost
from figsync.io.converter import node_from_rest, style_from_rest

logger = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://api.figma.com/v1"
DEFAULT_TIMEOUT = 30.0


class FigmaAPIClient:
    """Read-only wrapper over the Figma REST API."""

    def __init__(self, token: str, base_url: str = DEFAULT_BASE_URL, timeout: float = DEFAULT_TIMEOUT):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            "X-Figma-Token": token,
            "Content-Type": "application/json",
        })

    def get_file(self, file_key: str) -> dict:
        url = f"{self.base_url}/files/{file_key}"
        resp = self.session.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def get_file_nodes(self, file_key: str, node_ids: list) -> dict:
        url = f"{self.base_url}/files/{file_key}/nodes"
        params = {"ids": ",".join(node_ids)}
        resp = self.session.get(url, params=params, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def close(self) -> None:
        self.session.close()


class RestHost(DesignHost):
    """Host over a file fetched from the REST API.

    The REST API has no notion of a selection; the selection is given as
    node ids.

    Example:
        host = RestHost.connect("abc123", token, selection_ids=["1:2"])
        document = await ExportOrchestrator(host).export("selection")
    """

    def __init__(
        self,
        client: FigmaAPIClient,
        file_key: str,
        file_data: dict[str, Any],
        selection_ids: list[str] | None = None,
    ) -> None:
        """Initialize the host from an already fetched files response.

        Args:
            client: API client used for lazy style fetches
            file_key: Key of the fetched file
            file_data: JSON body of ``GET /v1/files/:key``
            selection_ids: Node ids treated as the current selection
        """
        self._client = client
        self._file_key = file_key
        self._file_name = file_data.get("name", "")
        self._selection_ids = list(selection_ids or [])

        self._component_meta: dict[str, dict[str, Any]] = {
            **file_data.get("components", {}),
            **file_data.get("componentSets", {}),
        }
        self._root = node_from_rest(file_data["document"], self._component_meta)
        self._nodes: dict[str, SceneNode] = {self._root.id: self._root}
        for node in self._root.iter_descendants():
            self._nodes[node.id] = node

        self._style_meta: dict[str, dict[str, Any]] = dict(file_data.get("styles", {}))
        self._styles: dict[str, SharedStyle] | None = None
        self._styles_pending: asyncio.Future[dict[str, SharedStyle]] | None = None

    @classmethod
    def connect(
        cls,
        file_key: str,
        token: str,
        selection_ids: list[str] | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> "RestHost":
        """Fetch a file and build a host for it.

        Raises:
            HostQueryError: If the file cannot be fetched
        """
        client = FigmaAPIClient(token, base_url=base_url, timeout=timeout)
        try:
            file_data = client.get_file(file_key)
        except requests.RequestException as e:
            client.close()
            raise HostQueryError("get_file", str(e)) from e
        logger.info("Fetched file", file_key=file_key, name=file_data.get("name"))
        return cls(client, file_key, file_data, selection_ids)

    @property
    def root(self) -> SceneNode:
        return self._root

    @property
    def document_name(self) -> str:
        return self._file_name or self._root.name

    @property
    def file_key(self) -> str | None:
        return self._file_key

    def current_selection(self) -> list[SceneNode]:
        selection = []
        for node_id in self._selection_ids:
            node = self._nodes.get(node_id)
            if node is None:
                logger.warning("Selected node not found in file", node_id=node_id)
                continue
            selection.append(node)
        return selection

    def get_node_by_id(self, node_id: str) -> SceneNode | None:
        node = self._nodes.get(node_id)
        if node is not None:
            return node
        # Components published from other files appear only in the metadata map
        meta = self._component_meta.get(node_id)
        if meta is None:
            return None
        return SceneNode(id=node_id, name=meta.get("name", ""), type=NodeType.COMPONENT.value)

    def get_style_by_id(self, style_id: str) -> SharedStyle | None:
        if self._styles is not None and style_id in self._styles:
            return self._styles[style_id]
        meta = self._style_meta.get(style_id)
        if meta is None:
            return None
        return SharedStyle(id=style_id, name=meta.get("name", ""))

    async def get_local_paint_styles(self) -> list[PaintStyle]:
        styles = await self._load_styles()
        return [s for s in styles.values() if isinstance(s, PaintStyle)]

    async def get_local_text_styles(self) -> list[TextStyle]:
        styles = await self._load_styles()
        return [s for s in styles.values() if isinstance(s, TextStyle)]

    async def get_local_effect_styles(self) -> list[EffectStyle]:
        styles = await self._load_styles()
        return [s for s in styles.values() if isinstance(s, EffectStyle)]

    def close(self) -> None:
        self._client.close()

    async def _load_styles(self) -> dict[str, SharedStyle]:
        if self._styles is not None:
            return self._styles

        # Concurrent enumerations await the same request, including its failure
        if self._styles_pending is None:
            self._styles_pending = asyncio.ensure_future(asyncio.to_thread(self._fetch_styles))
        pending = self._styles_pending
        try:
            styles = await pending
        finally:
            if self._styles_pending is pending and pending.done():
                self._styles_pending = None

        self._styles = styles
        return styles

    def _fetch_styles(self) -> dict[str, SharedStyle]:
        if not self._style_meta:
            return {}

        style_ids = list(self._style_meta)
        try:
            response = self._client.get_file_nodes(self._file_key, style_ids)
        except requests.RequestException as e:
            raise HostQueryError("get_file_nodes", str(e)) from e

        nodes = response.get("nodes", {})
        styles: dict[str, SharedStyle] = {}
        for style_id, meta in self._style_meta.items():
            entry = nodes.get(style_id) or {}
            document = entry.get("document")
            if document is None:
                logger.warning("Style definition missing from nodes response", style_id=style_id)
                continue
            style = style_from_rest(style_id, meta, document)
            if style is not None:
                styles[style_id] = style

        logger.debug("Fetched style definitions", requested=len(style_ids), loaded=len(styles))
        return styles
