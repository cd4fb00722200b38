from fastapi import APIRouter, Request

from techhub.utils.project import get_project_version

router = APIRouter(tags=["Service"])


@router.get("/", summary="Service information")
async def root(request: Request) -> dict:
    return {
        "app": request.app.title,
        "status": "UP",
        "version": get_project_version(),
        "health": "/health",
        "docs": request.app.docs_url,
    }


@router.get("/health", summary="Liveness probe")
async def health() -> dict:
    return {"status": "UP"}
