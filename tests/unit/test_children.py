"""Unit tests for child summaries."""

from figsync.core.children import summarize_children
from figsync.domain import ChildSummary, InstanceTraits, SceneNode, TextTraits
from figsync.host.snapshot import SnapshotHost
from figsync.utils.logging import ExportLogger


def _host_with(container: SceneNode, *extra: SceneNode) -> SnapshotHost:
    page = SceneNode(id="1:0", name="Page", type="PAGE", children=[container, *extra])
    root = SceneNode(id="0:0", name="Doc", type="DOCUMENT", children=[page])
    return SnapshotHost(root)


class TestSummarizeChildren:
    """Tests for summarize_children."""

    def test_text_and_instance_children(self) -> None:
        """Test text content and backing component names."""
        icon = SceneNode(id="5:0", name="Icon / Star", type="COMPONENT")
        card = SceneNode(
            id="2:0",
            name="Card",
            type="COMPONENT",
            children=[
                SceneNode(id="2:1", name="Title", type="TEXT", text=TextTraits("Hello")),
                SceneNode(id="2:2", name="Icon", type="INSTANCE", instance=InstanceTraits("5:0")),
                SceneNode(id="2:3", name="Bg", type="RECTANGLE"),
            ],
        )
        host = _host_with(card, icon)

        summaries = summarize_children(card, host, ExportLogger())

        assert summaries == [
            ChildSummary(type="TEXT", name="Title", node_id="2:1", text="Hello"),
            ChildSummary(type="INSTANCE", name="Icon", node_id="2:2", component_name="Icon / Star"),
            ChildSummary(type="RECTANGLE", name="Bg", node_id="2:3"),
        ]

    def test_deleted_backing_component(self) -> None:
        """Test that an instance of a deleted component omits the name."""
        card = SceneNode(
            id="2:0",
            name="Card",
            type="COMPONENT",
            children=[SceneNode(id="2:1", name="Ghost", type="INSTANCE", instance=InstanceTraits("9:9"))],
        )
        export_logger = ExportLogger()

        summaries = summarize_children(card, _host_with(card), export_logger)

        assert summaries[0].to_dict() == {"type": "INSTANCE", "name": "Ghost", "nodeId": "2:1"}
        assert export_logger.stats.unresolved_components == 1

    def test_instance_without_reference(self) -> None:
        """Test an instance whose backing id is unknown."""
        card = SceneNode(
            id="2:0",
            name="Card",
            type="COMPONENT",
            children=[SceneNode(id="2:1", name="Odd", type="INSTANCE", instance=InstanceTraits(None))],
        )
        assert summarize_children(card, _host_with(card), ExportLogger())[0].component_name is None

    def test_one_level_only(self) -> None:
        """Test that grandchildren are not summarized."""
        inner = SceneNode(id="3:1", name="Deep", type="TEXT", text=TextTraits("deep"))
        frame = SceneNode(id="3:0", name="Frame", type="FRAME", children=[inner])
        card = SceneNode(id="2:0", name="Card", type="COMPONENT", children=[frame])

        summaries = summarize_children(card, _host_with(card), ExportLogger())

        assert [s.node_id for s in summaries] == ["3:0"]
        assert summaries[0].text is None

    def test_empty_text(self) -> None:
        """Test that empty text content is still written."""
        card = SceneNode(
            id="2:0",
            name="Card",
            type="COMPONENT",
            children=[SceneNode(id="2:1", name="Empty", type="TEXT", text=TextTraits(""))],
        )
        assert summarize_children(card, _host_with(card), ExportLogger())[0].to_dict()["text"] == ""
