from .helpline_routes import router as helpline_router

__all__ = ["helpline_router"]
