"""Mode catalogue endpoint."""
from fastapi import APIRouter
from tech_therapy.modes import Mode, describe_modes

router = APIRouter(prefix="/api", tags=["modes"])


@router.get("/modes")
async def get_modes():
    """
    Get the support modes with their card copy and themes.

    Returns:
        Dictionary with the ordered mode list and per-mode details
    """
    return {
        "modes": describe_modes(),
        "order": [mode.value for mode in Mode],
    }
