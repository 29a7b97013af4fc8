from typing import Callable, Optional

import httpx
from openai import AsyncOpenAI

from ..config import Settings

ClientFactory = Callable[[Settings], AsyncOpenAI]


def build_openai_client(
    settings: Settings,
    http_client: Optional[httpx.AsyncClient] = None,
) -> AsyncOpenAI:
    """One client per request. Retries are disabled; a failed call is final."""
    return AsyncOpenAI(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url or None,
        max_retries=0,
        http_client=http_client,
    )
