# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : schema.py
@Date    : 2026/10/12 10:10
"""
from pydantic import BaseModel, ConfigDict


class SchemaBase(BaseModel):
    """Schema 基类"""

    model_config = ConfigDict(use_enum_values=True)
