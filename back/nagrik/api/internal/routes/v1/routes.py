# Third-party imports
from fastapi import APIRouter

# Local application imports
from nagrik.api.internal.routes.v1.areas import area_router
from nagrik.api.internal.routes.v1.auth import router as auth_router
from nagrik.api.internal.routes.v1.helplines import helpline_router
from nagrik.api.internal.routes.v1.issues import issue_router

router = APIRouter()

# Include all internal v1 routers
router.include_router(auth_router)
router.include_router(issue_router)
router.include_router(area_router)
router.include_router(helpline_router)
