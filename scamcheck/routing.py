from fastapi.routing import APIRoute
from starlette.routing import Match
from starlette.types import Receive, Scope, Send


class AnyMethodRoute(APIRoute):
    """
    Route that is dispatched for every HTTP method, including verbs it does
    not declare. `methods` only feeds the OpenAPI schema; the endpoint itself
    decides what to do with the request method.
    """

    def matches(self, scope: Scope) -> tuple[Match, Scope]:
        match, child_scope = super().matches(scope)
        if match == Match.PARTIAL:
            return Match.FULL, child_scope
        return match, child_scope

    async def handle(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.app(scope, receive, send)
