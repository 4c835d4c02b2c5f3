from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from tickcount.globalstate import GlobalState
from tickcount.logger import tick_log


class TickCountLogger(BaseHTTPMiddleware):
    """Logs the tick count once the wrapped request has been handled.

    Runs inside the ASGI app, so its line always precedes the server's
    access log line for the same request.
    """

    def __init__(self, app, gstate: GlobalState):
        super().__init__(app)
        self._gstate = gstate

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        c = self._gstate.gets(lambda st: st.tick_count)
        tick_log.info("* tick count after request handled: %d", c)
        return response
