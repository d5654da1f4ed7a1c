# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : path_conf.py
@Date    : 2026/10/12 09:40
"""
from pathlib import Path

# 项目根目录 (backend)
BASE_PATH = Path(__file__).resolve().parent.parent

# 日志文件路径
LOG_DIR = BASE_PATH / 'log'
