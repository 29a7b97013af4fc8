import json
import logging

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError

from ..config import Settings, get_settings
from ..dependencies import get_client_factory
from ..exceptions import BadRequest, MethodNotAllowed, ScamCheckError, UnexpectedServerError
from ..models.check import CheckRequest, ErrorResponse, Verdict
from ..routing import AnyMethodRoute
from ..services.openai_client import ClientFactory
from ..services.scam_check_service import check_message

logger = logging.getLogger(__name__)

# Every method reaches check_scam so that non-POST calls get the JSON 405 body.
router = APIRouter(prefix="/api", tags=["Scam Check"], route_class=AnyMethodRoute)


async def _read_check_request(request: Request) -> CheckRequest:
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise BadRequest()

    if not isinstance(body, dict):
        raise BadRequest()

    try:
        return CheckRequest.model_validate(body)
    except ValidationError:
        raise BadRequest()


@router.post(
    "/check",
    response_model=Verdict,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_405_METHOD_NOT_ALLOWED: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
    summary="Check whether a message is a likely scam",
    description=(
        "Sends the message and optional sender to OpenAI and returns a risk level "
        "with a plain-language summary, reason and advice. Only POST is accepted."
    ),
)
async def check_scam(
    request: Request,
    settings: Settings = Depends(get_settings),
    client_factory: ClientFactory = Depends(get_client_factory),
) -> Verdict:
    if request.method != "POST":
        raise MethodNotAllowed()

    try:
        check = await _read_check_request(request)
    except ScamCheckError:
        raise
    except Exception as exc:
        logger.exception("Failed to read request body: %s", exc)
        raise UnexpectedServerError() from exc

    return await check_message(check, settings, client_factory)
