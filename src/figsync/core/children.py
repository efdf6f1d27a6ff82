"""Shallow summaries of a container's direct children."""

from figsync.domain.nodes import SceneNode
from figsync.domain.records import ChildSummary
from figsync.host.base import DesignHost
from figsync.utils.logging import ExportLogger


def _main_component_name(
    child: SceneNode,
    main_id: str | None,
    host: DesignHost,
    export_logger: ExportLogger,
) -> str | None:
    main = host.get_node_by_id(main_id) if main_id else None
    if main is None:
        export_logger.log_component_unresolved(child.id, main_id)
        return None
    return main.name


def summarize_children(
    node: SceneNode,
    host: DesignHost,
    export_logger: ExportLogger,
) -> list[ChildSummary]:
    """Summarize the direct children of a node, one level deep.

    Text children carry their characters. Instance children carry the name
    of their backing component when it still exists.

    Args:
        node: Container whose children are summarized
        host: Host used to resolve instance backing components
        export_logger: Logger for unresolved instances

    Returns:
        One ChildSummary per direct child, in document order
    """
    summaries = []
    for child in node.children:
        text = None
        component_name = None

        if child.text is not None:
            text = child.text.characters
        if child.instance is not None:
            component_name = _main_component_name(
                child, child.instance.main_component_id, host, export_logger
            )

        summaries.append(ChildSummary(
            type=child.type,
            name=child.name,
            node_id=child.id,
            text=text,
            component_name=component_name,
        ))
    return summaries
