from fastapi import APIRouter, Depends

from mssgpt.core.settings import Settings, get_settings

router = APIRouter()


@router.get("/health")
def health_check(settings: Settings = Depends(get_settings)) -> dict[str, str]:
    # Does not touch the provider; a missing API key still reports ok.
    return {
        "status": "ok",
        "service": settings.app_name,
        "environment": settings.environment,
    }
