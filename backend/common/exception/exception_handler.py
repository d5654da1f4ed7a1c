# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : exception_handler.py
@Date    : 2026/10/12 10:20
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from backend.common.exception.errors import BaseExceptionMixin
from backend.common.log import log


def _response(code: int, msg: str, data=None) -> JSONResponse:
    return JSONResponse(status_code=code, content={'code': code, 'msg': msg, 'data': data})


def register_exception(app: FastAPI) -> None:
    """注册全局异常处理器"""

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return _response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = [
            {'loc': list(error.get('loc', ())), 'msg': error.get('msg'), 'type': error.get('type')}
            for error in exc.errors()
        ]
        return _response(status.HTTP_422_UNPROCESSABLE_CONTENT, '请求参数非法', errors)

    @app.exception_handler(BaseExceptionMixin)
    async def custom_exception_handler(request: Request, exc: BaseExceptionMixin):
        if exc.code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            log.error(f'{request.method} {request.url.path} 处理失败: {exc.msg}')
        return _response(exc.code, exc.msg, exc.data)

    @app.exception_handler(Exception)
    async def all_unknown_exception_handler(request: Request, exc: Exception):
        log.exception(f'{request.method} {request.url.path} 未知异常: {exc}')
        return _response(status.HTTP_500_INTERNAL_SERVER_ERROR, 'Internal Server Error')
