# -*- coding: UTF-8 -*-
"""
@Project : fota-server
@File    : errors.py
@Date    : 2026/10/12 10:14

全局业务异常类

业务代码执行异常时, 可以使用 raise xxxError 触发内部错误, 由全局异常处理器转换为统一响应
"""
from typing import Any

from fastapi import status


class BaseExceptionMixin(Exception):
    """基础异常混入类"""

    code: int

    def __init__(self, *, msg: str | None = None, data: Any = None) -> None:
        self.msg = msg
        self.data = data
        super().__init__(msg)


class RequestError(BaseExceptionMixin):
    """请求异常"""

    code = status.HTTP_400_BAD_REQUEST

    def __init__(self, *, msg: str = 'Bad Request', data: Any = None) -> None:
        super().__init__(msg=msg, data=data)


class InvalidIdentifierError(RequestError):
    """固件标识非法 (非数字)"""

    def __init__(self, *, msg: str = 'Invalid Identifier', data: Any = None) -> None:
        super().__init__(msg=msg, data=data)


class NotFoundError(BaseExceptionMixin):
    """资源不存在异常"""

    code = status.HTTP_404_NOT_FOUND

    def __init__(self, *, msg: str = 'Not Found', data: Any = None) -> None:
        super().__init__(msg=msg, data=data)


class ServerError(BaseExceptionMixin):
    """服务器异常"""

    code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, *, msg: str = 'Internal Server Error', data: Any = None) -> None:
        super().__init__(msg=msg, data=data)


class StorageUnavailableError(ServerError):
    """固件存储不可用"""

    code = status.HTTP_503_SERVICE_UNAVAILABLE

    def __init__(self, *, msg: str = 'Storage Unavailable', data: Any = None) -> None:
        super().__init__(msg=msg, data=data)
