# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : __init__.py
@Date    : 2026/10/12 10:40
"""
from backend.app.fota.model.device import Device as Device
from backend.app.fota.model.firmware import Firmware as Firmware
