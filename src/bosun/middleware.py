"""アクセストークン認証ミドルウェア。"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

TOKEN_HEADER = "x-bosun-token"


class TokenAuthMiddleware(BaseHTTPMiddleware):
    """アクセストークンを検証するミドルウェア。

    BOSUN_URL_TOKEN が設定されている場合、``token`` クエリパラメータ
    または ``X-Bosun-Token`` ヘッダーの一致を要求する。
    /health は検証対象外。
    """

    SKIP_PATHS = {"/health"}

    def __init__(self, app: ASGIApp, url_token: str = "") -> None:
        super().__init__(app)
        self.url_token = url_token

    def _presented_token(self, request: Request) -> str:
        return request.headers.get(TOKEN_HEADER) or request.query_params.get("token", "")

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if not self.url_token or request.url.path in self.SKIP_PATHS:
            return await call_next(request)

        if self._presented_token(request) != self.url_token:
            return JSONResponse(
                {"error": "Unauthorized", "message": "Invalid or missing token"},
                status_code=401,
            )

        return await call_next(request)
