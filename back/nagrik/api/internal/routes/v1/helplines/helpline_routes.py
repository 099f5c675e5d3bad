# Third-party imports
from fastapi import APIRouter

# Local application imports
from nagrik.config.helplines import DELHI_HELPLINES, Helpline, get_helpline_info
from nagrik.schemas.issues import HelplineResponse

router = APIRouter(prefix="/helplines", tags=["Helplines"])


def to_helpline_response(helpline: Helpline) -> HelplineResponse:
    return HelplineResponse(
        authority=helpline.authority,
        primary_helpline=helpline.helpline,
        alternate_helpline=helpline.alternate_helpline,
        department=helpline.department,
        portal=helpline.grievance_portal,
        description=helpline.description,
    )


@router.get("", response_model=dict[str, HelplineResponse])
async def list_helplines():
    """Every department helpline, keyed by department"""
    return {key: to_helpline_response(helpline) for key, helpline in DELHI_HELPLINES.items()}


@router.get("/{category}", response_model=HelplineResponse)
async def helpline_for_category(category: str):
    """Helpline for an issue category; unknown categories get the general civic helpline"""
    return to_helpline_response(get_helpline_info(category))
