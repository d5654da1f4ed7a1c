# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : __init__.py
@Date    : 2026/10/12 12:02
"""
from fastapi import APIRouter

from backend.app.fota.api.v1.firmware import router as firmware_router

router = APIRouter()

router.include_router(firmware_router)
