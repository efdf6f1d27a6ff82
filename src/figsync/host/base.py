"""Abstract host boundary.

A host owns the design document and answers the queries the export engine
needs. The engine only reads from it and copies values out during a single
export call.
"""

from abc import ABC, abstractmethod

from figsync.domain.nodes import EffectStyle, PaintStyle, SceneNode, SharedStyle, TextStyle


class DesignHost(ABC):
    """Query interface of a design document host.

    Style enumeration is asynchronous: hosts may have to wait on a remote
    runtime or service to answer it. All other queries are synchronous.
    """

    @property
    @abstractmethod
    def root(self) -> SceneNode:
        """Document root node; its children are the pages."""

    @property
    def document_name(self) -> str:
        """Display name of the document."""
        return self.root.name

    @property
    @abstractmethod
    def file_key(self) -> str | None:
        """Source document identifier, None when the host has none."""

    @abstractmethod
    def current_selection(self) -> list[SceneNode]:
        """Get the current page's selection, in selection order."""

    @abstractmethod
    def get_node_by_id(self, node_id: str) -> SceneNode | None:
        """Look up a node anywhere in the document.

        Returns:
            The node, or None when it does not exist (e.g. deleted)
        """

    @abstractmethod
    def get_style_by_id(self, style_id: str) -> SharedStyle | None:
        """Look up a shared style.

        Returns:
            The style, or None when the identifier does not resolve
        """

    @abstractmethod
    async def get_local_paint_styles(self) -> list[PaintStyle]:
        """Enumerate the document's paint styles."""

    @abstractmethod
    async def get_local_text_styles(self) -> list[TextStyle]:
        """Enumerate the document's text styles."""

    @abstractmethod
    async def get_local_effect_styles(self) -> list[EffectStyle]:
        """Enumerate the document's effect styles."""

    def close(self) -> None:
        """End the host session."""
        return None
