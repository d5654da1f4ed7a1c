# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : router.py
@Date    : 2026/10/12 12:01
"""
from fastapi import APIRouter

from backend.app.fota.api.v1 import router as fota_router

# 挂载在根路径, 设备按清单中的 bin 路径直接下载
v1 = APIRouter()

v1.include_router(fota_router, tags=['固件'])
