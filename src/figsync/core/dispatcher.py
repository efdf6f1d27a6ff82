"""Request dispatch for export sessions.

An ExportSession answers request messages from a caller (UI, CLI loop):

- ``{"operation": "export", "scope": "selection" | "tokens"}``
  -> ``{"kind": "export-result", "document": ..., "summary": ...}``
- ``{"operation": "get-info"}`` -> ``{"kind": "file-info", "data": ...}``
- ``{"operation": "cancel"}`` -> no response, the session ends

Any failure while handling a request becomes ``{"kind": "error", "message": ...}``;
the session stays usable for the next request.
"""

from typing import Any

import structlog

from figsync.core.orchestrator import ExportOrchestrator
from figsync.domain.records import ExportDocument
from figsync.exceptions import SessionClosedError, UnsupportedOperationError
from figsync.host.base import DesignHost
from figsync.utils.logging import ExportLogger, ExportStats

logger = structlog.get_logger(__name__)

OP_EXPORT = "export"
OP_INFO = "get-info"
OP_CANCEL = "cancel"


def error_response(message: str) -> dict[str, Any]:
    """Build an error response."""
    return {"kind": "error", "message": message}


def export_response(document: ExportDocument) -> dict[str, Any]:
    """Build the response for a finished export."""
    return {
        "kind": "export-result",
        "document": document.to_dict(),
        "summary": document.summary().to_dict(),
    }


class ExportSession:
    """Dispatches requests against one host until cancelled.

    Example:
        session = ExportSession(host)
        response = await session.handle({"operation": "export", "scope": "tokens"})
    """

    def __init__(self, host: DesignHost) -> None:
        self.host = host
        self._closed = False
        self.last_stats: ExportStats | None = None

    @property
    def closed(self) -> bool:
        """Whether the session has been cancelled."""
        return self._closed

    async def handle(self, request: dict[str, Any]) -> dict[str, Any] | None:
        """Handle one request.

        Args:
            request: Message with an ``operation`` (or ``type``) field and,
                for exports, an optional ``scope``

        Returns:
            Response message, or None for cancel
        """
        operation = request.get("operation", request.get("type"))
        try:
            return await self._dispatch(operation, request)
        except Exception as e:
            logger.error(
                "Request failed",
                operation=operation,
                error=str(e),
                error_type=type(e).__name__,
            )
            return error_response(str(e) or type(e).__name__)

    async def _dispatch(self, operation: Any, request: dict[str, Any]) -> dict[str, Any] | None:
        if self._closed:
            raise SessionClosedError()

        if operation == OP_EXPORT:
            return await self._export(request.get("scope"))
        if operation == OP_INFO:
            return await self._info()
        if operation == OP_CANCEL:
            self.cancel()
            return None
        raise UnsupportedOperationError(operation)

    async def _export(self, scope: str | None) -> dict[str, Any]:
        export_logger = ExportLogger()
        orchestrator = ExportOrchestrator(self.host, export_logger)
        document = await orchestrator.export(scope)
        self.last_stats = export_logger.stats

        summary = document.summary()
        logger.info(
            "Export complete",
            scope=scope or "document",
            components=summary.component_count,
            colors=summary.color_style_count,
            text=summary.text_style_count,
            effects=summary.effect_style_count,
        )
        return export_response(document)

    async def _info(self) -> dict[str, Any]:
        info = await ExportOrchestrator(self.host).info()
        return {"kind": "file-info", "data": info.to_dict()}

    def cancel(self) -> None:
        """End the session and release the host."""
        if self._closed:
            return
        self._closed = True
        self.host.close()
        logger.info("Session cancelled")
