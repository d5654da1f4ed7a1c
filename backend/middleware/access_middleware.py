# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : access_middleware.py
@Date    : 2026/10/12 12:20
"""
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from backend.common.log import log
from backend.utils.timezone import timezone


class AccessMiddleware(BaseHTTPMiddleware):
    """请求日志中间件"""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start_time = timezone.now()
        response = await call_next(request)
        elapsed = round((timezone.now() - start_time).total_seconds() * 1000.0, 3)
        host = request.client.host if request.client else '-'
        log.info(f'{host: <15} | {request.method: <8} | {response.status_code: <6} | {request.url.path} | {elapsed}ms')
        return response
