"""通用响应封装与表单模型基类。"""

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class ResponseEnvelope(BaseModel, Generic[T]):
    """统一的响应外层结构；列表接口附带的 ``count``、``pagination`` 作为额外字段保留。"""

    model_config = ConfigDict(extra="allow")

    success: bool
    message: str
    data: Optional[T] = None


class FormModel(BaseModel):
    """multipart 表单字段模型：去除首尾空白，拒绝未声明的字段。"""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


RecordResponse = ResponseEnvelope[Dict[str, Any]]
RecordListResponse = ResponseEnvelope[List[Dict[str, Any]]]
