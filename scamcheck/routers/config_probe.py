from fastapi import APIRouter, Depends

from ..config import Settings, get_settings
from ..models.check import ConfigProbeResponse
from ..routing import AnyMethodRoute

router = APIRouter(prefix="/api", tags=["Config"], route_class=AnyMethodRoute)


@router.get(
    "/test",
    response_model=ConfigProbeResponse,
    summary="Report whether OPENAI_API_KEY is configured",
    description="Answers every HTTP method; GET is the documented one.",
)
async def config_probe(settings: Settings = Depends(get_settings)) -> ConfigProbeResponse:
    return ConfigProbeResponse(has_key=bool(settings.openai_api_key))
