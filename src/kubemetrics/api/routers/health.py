from fastapi import APIRouter

from kubemetrics import __version__

router = APIRouter()


@router.get("/healthz")
async def health():
    """Liveness probe. Does not contact the cluster."""
    return {"status": "ok", "version": __version__}
