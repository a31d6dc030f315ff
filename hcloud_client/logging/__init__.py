from .config import get_logger, setup_logging
from .correlation import clear_context, get_request_id, set_request_id

__all__ = ["setup_logging", "get_logger", "set_request_id", "get_request_id", "clear_context"]
