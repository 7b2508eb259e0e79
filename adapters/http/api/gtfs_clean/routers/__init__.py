from .clean_router import router as clean_router

__all__ = ["clean_router"]
