"""Unit tests for the REST API host."""

import asyncio
from unittest.mock import MagicMock, Mock, patch

import pytest
import requests

from figsync.core.orchestrator import ExportOrchestrator
from figsync.domain import EffectStyle, PaintStyle, SharedStyle, TextStyle
from figsync.exceptions import HostQueryError
from figsync.host.rest import FigmaAPIClient, RestHost

FILE_DATA = {
    "name": "Remote Kit",
    "document": {
        "id": "0:0",
        "type": "DOCUMENT",
        "name": "Document",
        "children": [
            {
                "id": "1:0",
                "type": "CANVAS",
                "name": "Page 1",
                "children": [
                    {
                        "id": "2:0",
                        "type": "COMPONENT",
                        "name": "Chip",
                        "rectangleCornerRadii": [2, 2, 5, 2],
                        "fills": [{"type": "SOLID", "color": {"r": 1, "g": 0, "b": 0, "a": 1}}],
                        "strokes": [],
                        "effects": [],
                        "styles": {"fill": "S:red"},
                        "children": [
                            {"id": "2:1", "type": "INSTANCE", "name": "Remote icon", "componentId": "9:9"},
                        ],
                    }
                ],
            }
        ],
    },
    "components": {
        "2:0": {"key": "k1", "name": "Chip", "description": "Small label"},
        "9:9": {"key": "k2", "name": "Library Icon", "description": ""},
    },
    "componentSets": {},
    "styles": {
        "S:red": {"key": "s1", "name": "Red", "styleType": "FILL", "description": ""},
        "S:body": {"key": "s2", "name": "Body", "styleType": "TEXT", "description": "Copy"},
        "S:lift": {"key": "s3", "name": "Lift", "styleType": "EFFECT", "description": ""},
        "S:grid": {"key": "s4", "name": "Grid", "styleType": "GRID", "description": ""},
    },
}

NODES_RESPONSE = {
    "nodes": {
        "S:red": {"document": {"id": "S:red", "fills": [{"type": "SOLID", "color": {"r": 1, "g": 0, "b": 0}}]}},
        "S:body": {"document": {"id": "S:body", "style": {"fontFamily": "Inter", "fontWeight": 400, "fontSize": 14}}},
        "S:lift": {"document": {"id": "S:lift", "effects": [{"type": "DROP_SHADOW", "radius": 3}]}},
        "S:grid": {"document": {"id": "S:grid"}},
    }
}


def _host(selection_ids: list[str] | None = None) -> tuple[RestHost, Mock]:
    client = Mock(spec=FigmaAPIClient)
    client.get_file_nodes.return_value = NODES_RESPONSE
    return RestHost(client, "KEY", FILE_DATA, selection_ids), client


class TestFigmaAPIClient:
    """Tests for FigmaAPIClient."""

    def test_token_header(self) -> None:
        """Test that the access token is sent on every request."""
        client = FigmaAPIClient("secret")
        assert client.session.headers["X-Figma-Token"] == "secret"

    def test_get_file_nodes_params(self) -> None:
        """Test the nodes endpoint call."""
        client = FigmaAPIClient("secret", base_url="https://example.test/v1/", timeout=5)
        response = MagicMock()
        response.json.return_value = {"nodes": {}}
        with patch.object(client.session, "get", return_value=response) as mock_get:
            assert client.get_file_nodes("KEY", ["1:2", "3:4"]) == {"nodes": {}}
        mock_get.assert_called_once_with(
            "https://example.test/v1/files/KEY/nodes",
            params={"ids": "1:2,3:4"},
            timeout=5,
        )
        response.raise_for_status.assert_called_once()


class TestRestHost:
    """Tests for RestHost."""

    def test_tree_and_names(self) -> None:
        """Test the converted tree and document name."""
        host, _ = _host()
        assert host.document_name == "Remote Kit"
        assert host.file_key == "KEY"
        chip = host.get_node_by_id("2:0")
        assert chip.component.description == "Small label"

    def test_library_component_lookup(self) -> None:
        """Test that components known only from metadata still resolve by name."""
        host, _ = _host()
        assert host.get_node_by_id("9:9").name == "Library Icon"
        assert host.get_node_by_id("nope") is None

    def test_selection_from_ids(self) -> None:
        """Test selection by node id, skipping unknown ids."""
        host, _ = _host(["2:0", "missing"])
        assert [n.id for n in host.current_selection()] == ["2:0"]

    def test_style_lookup_before_fetch(self) -> None:
        """Test style lookup from the file-level style map."""
        host, client = _host()
        style = host.get_style_by_id("S:red")
        assert style == SharedStyle(id="S:red", name="Red")
        assert host.get_style_by_id("S:none") is None
        client.get_file_nodes.assert_not_called()

    def test_style_enumeration_fetches_once(self) -> None:
        """Test that the three enumerations share one nodes request."""
        host, client = _host()

        async def enumerate_all():
            return await asyncio.gather(
                host.get_local_paint_styles(),
                host.get_local_text_styles(),
                host.get_local_effect_styles(),
            )

        paint, text, effect = asyncio.run(enumerate_all())

        client.get_file_nodes.assert_called_once_with("KEY", ["S:red", "S:body", "S:lift", "S:grid"])
        assert [type(s) for s in (*paint, *text, *effect)] == [PaintStyle, TextStyle, EffectStyle]
        assert text[0].description == "Copy"

    def test_style_fetch_failure(self) -> None:
        """Test that HTTP errors surface as HostQueryError."""
        host, client = _host()
        client.get_file_nodes.side_effect = requests.ConnectionError("offline")
        with pytest.raises(HostQueryError, match="offline"):
            asyncio.run(host.get_local_paint_styles())

    def test_style_fetch_failure_not_repeated(self) -> None:
        """Test that a failed style fetch is shared by all three enumerations."""
        host, client = _host()
        client.get_file_nodes.side_effect = requests.ConnectionError("offline")
        with pytest.raises(HostQueryError, match="offline"):
            asyncio.run(ExportOrchestrator(host).export("tokens"))
        assert client.get_file_nodes.call_count == 1

    def test_style_fetch_after_failure(self) -> None:
        """Test that a later export requests the styles again and succeeds."""
        host, client = _host()
        client.get_file_nodes.side_effect = [requests.ConnectionError("offline"), NODES_RESPONSE]
        with pytest.raises(HostQueryError):
            asyncio.run(ExportOrchestrator(host).export("tokens"))

        document = asyncio.run(ExportOrchestrator(host).export("tokens"))
        assert [s.name for s in document.styles.colors] == ["Red"]
        assert client.get_file_nodes.call_count == 2

    def test_export(self) -> None:
        """Test a full export against the REST host."""
        host, _ = _host()
        document = asyncio.run(ExportOrchestrator(host).export())

        chip = document.components[0].to_dict()
        assert chip["visual"]["cornerRadius"] == {"topLeft": 2, "topRight": 2, "bottomRight": 5, "bottomLeft": 2}
        assert chip["visual"]["fills"][0]["styleName"] == "Red"
        assert chip["children"][0]["componentName"] == "Library Icon"
        assert [c.name for c in document.styles.colors] == ["Red"]

    def test_connect_failure(self) -> None:
        """Test that a failed file fetch raises HostQueryError."""
        with patch.object(FigmaAPIClient, "get_file", side_effect=requests.HTTPError("403 Forbidden")):
            with pytest.raises(HostQueryError, match="403"):
                RestHost.connect("KEY", "bad-token")

    def test_close(self) -> None:
        """Test that closing the host closes the HTTP session."""
        host, client = _host()
        host.close()
        client.close.assert_called_once()
