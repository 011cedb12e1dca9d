from .health import router as health_router
from .user import router as user_router

__all__ = ["health_router", "user_router"]
