import json
import logging
from typing import Any, Optional

from openai import APIStatusError
from pydantic import ValidationError

from ..config import Settings
from ..exceptions import (
    IncompleteUpstreamResponse,
    MalformedUpstreamResponse,
    ScamCheckError,
    ServerConfigError,
    UnexpectedServerError,
    UpstreamError,
)
from ..models.check import CheckRequest, Verdict
from .openai_client import ClientFactory, build_openai_client
from .prompts import SYSTEM_PROMPT, user_prompt

logger = logging.getLogger(__name__)


def build_prompt(request: CheckRequest) -> str:
    return user_prompt(message=request.message, sender=request.sender)


def parse_verdict(content: Optional[str]) -> tuple[Verdict | None, ScamCheckError | None]:
    """
    Parse the model's reply into a Verdict.
    Returns (verdict, error); exactly one of them is None.
    """
    if not isinstance(content, str):
        logger.error("AI response had no content.")
        return None, MalformedUpstreamResponse()

    try:
        parsed: Any = json.loads(content)
    except json.JSONDecodeError:
        logger.error("Failed to parse AI JSON: %s", content)
        return None, MalformedUpstreamResponse()

    if not isinstance(parsed, dict):
        logger.error("AI response missing fields: %s", parsed)
        return None, IncompleteUpstreamResponse()

    try:
        return Verdict.model_validate(parsed), None
    except ValidationError as exc:
        logger.error("AI response missing fields: %s (%d errors)", parsed, exc.error_count())
        return None, IncompleteUpstreamResponse()


def _first_choice_content(response: Any) -> Optional[str]:
    try:
        return response.choices[0].message.content
    except (AttributeError, IndexError, TypeError):
        return None


async def _request_completion(
    request: CheckRequest,
    settings: Settings,
    client_factory: ClientFactory,
) -> Optional[str]:
    async with client_factory(settings) as client:
        try:
            response = await client.chat.completions.create(
                model=settings.openai_model,
                temperature=settings.openai_temperature,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": build_prompt(request)},
                ],
            )
        except APIStatusError as exc:
            text = exc.response.text
            logger.error("OpenAI error: %s %s", exc.status_code, text)
            raise UpstreamError(details=text) from exc

    return _first_choice_content(response)


async def check_message(
    request: CheckRequest,
    settings: Settings,
    client_factory: ClientFactory = build_openai_client,
) -> Verdict:
    """
    Ask the model whether `request.message` looks like a scam.
    Raises a ScamCheckError subclass on any failure; nothing else escapes.
    """
    try:
        if not settings.openai_api_key:
            logger.error("OPENAI_API_KEY is missing in environment.")
            raise ServerConfigError()

        content = await _request_completion(request, settings, client_factory)

        verdict, error = parse_verdict(content)
        if error is not None:
            raise error
        return verdict
    except ScamCheckError:
        raise
    except Exception as exc:
        logger.exception("Scam check failed: %s", exc)
        raise UnexpectedServerError() from exc
