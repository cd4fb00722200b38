from .error_handlers import register_exception_handlers
from .frameworks import router as frameworks_router
from .root import router as root_router

__all__ = ["register_exception_handlers", "frameworks_router", "root_router"]
