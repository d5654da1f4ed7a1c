# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : conf.py
@Date    : 2026/10/12 09:41
"""
from functools import lru_cache
from typing import Literal

from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

from backend.core.path_conf import BASE_PATH


class Settings(BaseSettings):
    """全局配置"""

    model_config = SettingsConfigDict(
        env_file=f'{BASE_PATH}/.env',
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=True,
    )

    # FastAPI
    FASTAPI_TITLE: str = 'FOTA Server'
    FASTAPI_VERSION: str = '1.0.0'
    FASTAPI_DESCRIPTION: str = 'Firmware over-the-air lookup and download service'
    FASTAPI_DOCS_URL: str | None = '/docs'
    FASTAPI_REDOC_URL: str | None = '/redoc'
    FASTAPI_OPENAPI_URL: str | None = '/openapi'

    # Uvicorn
    UVICORN_HOST: str = '0.0.0.0'
    UVICORN_PORT: int = 8000
    UVICORN_RELOAD: bool = False

    # 数据库
    DATABASE_TYPE: Literal['mysql', 'sqlite'] = 'mysql'
    DATABASE_HOST: str = '127.0.0.1'
    DATABASE_PORT: int = 3306
    DATABASE_USER: str = 'root'
    DATABASE_PASSWORD: str = ''
    DATABASE_SCHEMA: str = 'fota_firmware'
    DATABASE_CHARSET: str = 'utf8mb4'
    DATABASE_ECHO: bool | Literal['debug'] = False
    DATABASE_POOL_ECHO: bool | Literal['debug'] = False
    DATABASE_INIT_TABLES: bool = True

    # 固件清单
    FOTA_MANIFEST_PORT: str = '80'
    FOTA_MANIFEST_HOST: str | None = None
    FOTA_CHUNK_SIZE: PositiveInt = 64 * 1024

    # 时间
    DATETIME_TIMEZONE: str = 'Asia/Shanghai'

    # 日志
    LOG_STD_LEVEL: str = 'INFO'
    LOG_STD_FORMAT: str = (
        '<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <lvl>{level: <8}</lvl> | '
        '<cyan>{name}:{function}:{line}</cyan> - <lvl>{message}</lvl>'
    )
    LOG_FILE_ENABLED: bool = True
    LOG_ACCESS_FILE_LEVEL: str = 'INFO'
    LOG_ERROR_FILE_LEVEL: str = 'ERROR'
    LOG_FILE_FORMAT: str = '{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}'
    LOG_ACCESS_FILENAME: str = 'fota_access.log'
    LOG_ERROR_FILENAME: str = 'fota_error.log'


@lru_cache
def get_settings() -> Settings:
    """获取全局配置"""
    return Settings()


settings = get_settings()
