# Third-party imports
from fastapi import APIRouter

# Local application imports
from nagrik.api.internal.routes.v1.auth.auth_routes import router as auth_routes

router = APIRouter(prefix="/auth", tags=["Authentication"])

router.include_router(auth_routes)
