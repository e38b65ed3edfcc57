from fastapi import APIRouter
from datetime import datetime
from sga_transcoder import __version__


router = APIRouter()


@router.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": __version__,
        "service": "sga-transcoder",
    }
