from fastapi import APIRouter, Request

from itinerary_planner import __version__

router = APIRouter()


@router.get("/health")
def healthcheck(request: Request) -> dict:
    settings = request.app.state.settings
    return {"status": "ok", "version": __version__, "llm_provider": settings.llm_provider}
