# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : main.py
@Date    : 2026/10/12 12:40
"""
from pathlib import Path

import uvicorn

from backend.common.log import log
from backend.core.conf import settings
from backend.core.registrar import register_app

app = register_app()


if __name__ == '__main__':
    try:
        log.info(f'{settings.FASTAPI_TITLE} 启动中 [{settings.UVICORN_HOST}:{settings.UVICORN_PORT}]')
        uvicorn.run(
            app=f'backend.{Path(__file__).stem}:app',
            host=settings.UVICORN_HOST,
            port=settings.UVICORN_PORT,
            reload=settings.UVICORN_RELOAD,
        )
    except Exception as e:
        log.error(f'❌ FastAPI 启动失败: {e}')
