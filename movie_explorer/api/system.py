"""System API routes"""

from fastapi import APIRouter, HTTPException, Query

from .. import __version__
from ..config import settings as app_settings
from ..schemas.views import AboutView
from ..services.log_service import log_service

router = APIRouter(prefix="/api/system", tags=["system"])

ABOUT_PARAGRAPHS = [
    "Movie Explorer lets you search movies, view details, and save your "
    "favorites using the OMDb API.",
    "Use the search on the Home page to find movies, open the details page "
    "for more information, and manage your favorites from any page.",
]


@router.get("/about", response_model=AboutView)
async def about():
    """Static informational view"""
    return AboutView(
        name="Movie Explorer", version=__version__, paragraphs=ABOUT_PARAGRAPHS
    )


@router.get("/status")
async def system_status():
    """Basic system status check"""
    return {
        "status": "ok",
        "version": __version__,
        "omdb_configured": bool(app_settings.OMDB_API_KEY),
        "data_dir": str(app_settings.DATA_DIR),
        "logs_dir": str(app_settings.LOGS_DIR),
    }


@router.get("/logs")
async def get_logs(
    type: str = Query("error", pattern="^(error|info|requests)$"),
    limit: int = Query(100, ge=1, le=1000),
):
    """Get recent log entries"""
    try:
        logs = log_service.get_logs(type, limit)
        return {"log_type": type, "lines": logs, "count": len(logs)}
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to read logs: {str(e)}")
