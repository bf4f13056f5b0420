from .health import build_health_router
from .page import build_page_router
from .reply import build_reply_router

__all__ = ["build_health_router", "build_page_router", "build_reply_router"]
