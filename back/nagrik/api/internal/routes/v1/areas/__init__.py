from .area_routes import router as area_router

__all__ = ["area_router"]
