"""Error taxonomy for notation generation and rendering."""

from typing import Optional, Dict, Any


class DiagramError(Exception):
    """Base exception for diagram notation errors."""

    def __init__(
        self,
        message: str,
        code: int = -32603,
        data: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data or {}

    def to_json_rpc_error(self, request_id: Optional[str] = None) -> Dict[str, Any]:
        """Convert to JSON-RPC error response."""
        error_response = {
            "jsonrpc": "2.0",
            "error": {
                "code": self.code,
                "message": self.message,
            },
            "id": request_id,
        }

        if self.data:
            error_response["error"]["data"] = self.data

        return error_response


class InputError(DiagramError):
    """Empty or malformed variant data supplied by a caller."""

    def __init__(self, message: str, data: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=-32602, data=data)


class RenderCollisionError(DiagramError):
    """A render was requested for a container id that is already in use."""

    def __init__(self, container_id: str, data: Optional[Dict[str, Any]] = None):
        super().__init__(
            f"Duplicate id '{container_id}': container has already been rendered",
            code=-32010,
            data={"container_id": container_id, **(data or {})},
        )
        self.container_id = container_id


class RenderFailure(DiagramError):
    """The rendering engine rejected the notation or crashed."""

    def __init__(self, message: str, data: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=-32011, data=data)


class PreconditionFailure(DiagramError):
    """Rendering was requested without a presentation-capable host."""

    def __init__(self, message: str, data: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=-32012, data=data)


def handle_exception(
    exception: Exception,
    request_id: Optional[str] = None,
    default_message: str = "Internal error"
) -> Dict[str, Any]:
    """Convert any exception to a JSON-RPC error payload.

    Args:
        exception: Exception to convert
        request_id: Request ID for the response
        default_message: Message used for exceptions outside the taxonomy

    Returns:
        JSON-RPC error response
    """
    if isinstance(exception, DiagramError):
        return exception.to_json_rpc_error(request_id)

    if isinstance(exception, ValueError):
        error: DiagramError = InputError(str(exception))
    else:
        error = DiagramError(default_message, data={"original_error": str(exception)})

    return error.to_json_rpc_error(request_id)
