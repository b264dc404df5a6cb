from cortex.presentation.api.routers.notes import router as notes_router
from cortex.presentation.api.routers.public import router as public_router
from cortex.presentation.api.routers.query import router as query_router

__all__ = [
    "notes_router",
    "public_router",
    "query_router",
]
