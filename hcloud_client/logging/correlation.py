import structlog


def set_request_id(request_id: str) -> None:
    """Bind a caller-supplied request ID to every log line in the current context."""
    structlog.contextvars.bind_contextvars(request_id=request_id)


def get_request_id() -> str | None:
    """Get request ID from current context."""
    return structlog.contextvars.get_contextvars().get("request_id")


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()
