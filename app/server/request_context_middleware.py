from starlette.middleware.base import BaseHTTPMiddleware

from infrastructure.logging import bind_request_context, get_correlation_id

CORRELATION_ID_HEADER = "X-Correlation-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind a correlation id and request metadata to every log entry.

    The id comes from the ``X-Correlation-ID`` request header when present
    and is echoed back on the response.
    """

    async def dispatch(self, request, call_next):
        with bind_request_context(
            correlation_id=request.headers.get(CORRELATION_ID_HEADER),
            request_path=request.url.path,
            request_method=request.method,
        ):
            correlation_id = get_correlation_id()
            response = await call_next(request)
        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response
