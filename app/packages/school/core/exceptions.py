"""异常处理模块：定义统一的业务异常与响应格式。

错误分类：
- ``ValidationError``：请求字段缺失/非法、文件类型或大小不合规、缺少必需文件（400）；
- ``NotFoundError``：目标记录不存在（404）；
- ``ConflictError``：唯一性冲突（沿用原接口约定返回 400）；
- ``StorageError``：上传目录读写失败（500）。
"""

from typing import Any

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.packages.school.core.config import get_settings
from app.packages.school.core.constants import (
    HTTP_STATUS_BAD_REQUEST,
    HTTP_STATUS_DUPLICATE,
    HTTP_STATUS_INTERNAL_SERVER_ERROR,
    HTTP_STATUS_NOT_FOUND,
)
from app.packages.school.core.logger import logger


class AppException(HTTPException):
    """携带统一响应结构的业务异常，方便在全局处理中转换响应体。"""

    default_code = HTTP_STATUS_BAD_REQUEST

    def __init__(self, msg: str, code: int | None = None, data=None) -> None:
        super().__init__(status_code=code or self.default_code, detail=msg)
        self.data = data

    def __str__(self) -> str:
        return str(self.detail)


class ValidationError(AppException):
    default_code = HTTP_STATUS_BAD_REQUEST


class MissingRequiredFile(ValidationError):
    """必需的附件字段未上传。"""


class NotFoundError(AppException):
    default_code = HTTP_STATUS_NOT_FOUND


class ConflictError(AppException):
    default_code = HTTP_STATUS_DUPLICATE


class StorageError(AppException):
    default_code = HTTP_STATUS_INTERNAL_SERVER_ERROR


class BlobExistsError(StorageError):
    """目标文件名已被占用，调用方可重新生成名称后重试。"""


def _error_payload(message: str, error: Any = None) -> dict[str, Any]:
    payload: dict[str, Any] = {"success": False, "message": message}
    if error is not None:
        payload["error"] = error
    return payload


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:  # pragma: no cover - framework glue
    """将 ``HTTPException`` 转换为 ``{success: false, message, error?}``。"""
    data = getattr(exc, "data", None)
    if exc.status_code >= HTTP_STATUS_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
        if not get_settings().debug:
            data = None
    return JSONResponse(status_code=exc.status_code, content=_error_payload(str(exc.detail), data))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:  # pragma: no cover - framework glue
    """路径参数或表单字段格式错误统一按 400 返回。"""
    def _serialize(obj: Any) -> Any:
        if isinstance(obj, Exception):
            return str(obj)
        if isinstance(obj, dict):
            return {key: _serialize(value) for key, value in obj.items()}
        if isinstance(obj, (list, tuple)):
            return [_serialize(item) for item in obj]
        return obj

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_payload("Invalid request parameters", _serialize(exc.errors())),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:  # pragma: no cover - framework glue
    """兜底处理：记录堆栈，并将未捕获异常转换为标准的 500 响应结构。"""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    error = str(exc) if get_settings().debug else None
    return JSONResponse(
        status_code=HTTP_STATUS_INTERNAL_SERVER_ERROR,
        content=_error_payload("Internal server error", error),
    )


__all__ = [
    "AppException",
    "ValidationError",
    "MissingRequiredFile",
    "NotFoundError",
    "ConflictError",
    "StorageError",
    "BlobExistsError",
    "http_exception_handler",
    "validation_exception_handler",
    "generic_exception_handler",
]
