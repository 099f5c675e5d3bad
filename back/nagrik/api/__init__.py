# Third-party imports
from fastapi import APIRouter

# Local application imports
from nagrik.api.internal.main import router as internal_router
from nagrik.settings import settings

router = APIRouter(prefix=settings.API_V1_STR)

router.include_router(internal_router)
