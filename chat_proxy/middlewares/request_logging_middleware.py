import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from chat_proxy.utils.log_sanitizer import safe_info

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """요청마다 메서드, 라우트 경로, 상태 코드, 처리 시간을 로깅"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            process_time = (time.perf_counter() - start_time) * 1000  # ms 단위

            # 라우트 패턴 우선 사용
            route_obj = request.scope.get("route")
            path = route_obj.path if route_obj else request.url.path

            safe_info(
                logger,
                "%s %s -> %s (%sms)",
                request.method,
                path,
                status_code,
                f"{process_time:.1f}",
            )
