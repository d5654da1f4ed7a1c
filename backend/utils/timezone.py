# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : timezone.py
@Date    : 2026/10/12 10:05
"""
import zoneinfo

from datetime import datetime

from backend.core.conf import settings

class TimeZone:
    def __init__(self, tz: str = settings.DATETIME_TIMEZONE) -> None:
        self.tz_info = zoneinfo.ZoneInfo(tz)

    def now(self) -> datetime:
        """获取时区时间"""
        return datetime.now(self.tz_info)


timezone: TimeZone = TimeZone()
