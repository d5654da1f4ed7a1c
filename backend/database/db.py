# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : db.py
@Date    : 2026/10/12 10:31
"""
import sys

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy import URL
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from backend.common.log import log
from backend.common.model import MappedBase
from backend.core.conf import settings


def create_database_url() -> URL:
    """
    创建数据库链接

    mysql 使用 asyncmy 驱动, sqlite 使用 aiosqlite 驱动 (DATABASE_SCHEMA 为数据库文件路径)
    """
    if settings.DATABASE_TYPE == 'sqlite':
        return URL.create(drivername='sqlite+aiosqlite', database=settings.DATABASE_SCHEMA)

    return URL.create(
        drivername='mysql+asyncmy',
        username=settings.DATABASE_USER,
        password=settings.DATABASE_PASSWORD,
        host=settings.DATABASE_HOST,
        port=settings.DATABASE_PORT,
        database=settings.DATABASE_SCHEMA,
        query={'charset': settings.DATABASE_CHARSET},
    )


def create_async_engine_and_session(url: str | URL) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """创建数据库引擎和 Session"""
    try:
        if settings.DATABASE_TYPE == 'sqlite':
            engine = create_async_engine(
                url,
                echo=settings.DATABASE_ECHO,
                echo_pool=settings.DATABASE_POOL_ECHO,
                future=True,
            )
        else:
            engine = create_async_engine(
                url,
                echo=settings.DATABASE_ECHO,
                echo_pool=settings.DATABASE_POOL_ECHO,
                future=True,
                pool_size=10,
                max_overflow=20,
                pool_timeout=30,
                pool_recycle=3600,
                pool_pre_ping=True,
                pool_use_lifo=False,
            )
    except Exception as e:
        log.error('❌ 数据库链接失败 {}', e)
        sys.exit()
    else:
        db_session = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )
        return engine, db_session


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """获取数据库会话"""
    async with async_db_session() as session:
        yield session


async def create_tables() -> None:
    """创建数据库表"""
    async with async_engine.begin() as coon:
        await coon.run_sync(MappedBase.metadata.create_all)


async def dispose_engine() -> None:
    """释放数据库连接池"""
    await async_engine.dispose()


SQLALCHEMY_DATABASE_URL = create_database_url()

async_engine, async_db_session = create_async_engine_and_session(SQLALCHEMY_DATABASE_URL)

# 只读会话, 固件查询不涉及写入
CurrentSession = Annotated[AsyncSession, Depends(get_db)]
