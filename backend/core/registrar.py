# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : registrar.py
@Date    : 2026/10/12 12:30
"""
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from backend.app.router import router
from backend.common.exception.exception_handler import register_exception
from backend.common.log import log, set_custom_logfile, setup_logging
from backend.core.conf import settings
from backend.database.db import create_tables, dispose_engine
from backend.middleware.access_middleware import AccessMiddleware


@asynccontextmanager
async def register_init(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    启动初始化

    :param app: FastAPI 应用实例
    :return:
    """
    if settings.DATABASE_INIT_TABLES:
        await create_tables()
    log.info(f'{settings.FASTAPI_TITLE} 已启动')

    yield

    await dispose_engine()


def register_app() -> FastAPI:
    """注册 FastAPI 应用"""
    app = FastAPI(
        title=settings.FASTAPI_TITLE,
        version=settings.FASTAPI_VERSION,
        description=settings.FASTAPI_DESCRIPTION,
        docs_url=settings.FASTAPI_DOCS_URL,
        redoc_url=settings.FASTAPI_REDOC_URL,
        openapi_url=settings.FASTAPI_OPENAPI_URL,
        lifespan=register_init,
    )

    register_logger()
    register_middleware(app)
    register_router(app)
    register_exception(app)

    return app


def register_logger() -> None:
    setup_logging()
    if settings.LOG_FILE_ENABLED:
        set_custom_logfile()


def register_middleware(app: FastAPI) -> None:
    app.add_middleware(AccessMiddleware)


def register_router(app: FastAPI) -> None:
    app.include_router(router)
