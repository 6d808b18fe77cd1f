"""响应封装：构建系统统一的返回结构。"""

from typing import Any


def create_response(message: str, data: Any = None, **extra: Any) -> dict[str, Any]:
    """按照 ``success``、``message``、``data`` 组合出统一响应体。

    列表类接口可通过 ``extra`` 附加 ``count`` 或 ``pagination`` 等字段。
    """
    payload: dict[str, Any] = {"success": True, "message": message, "data": data}
    payload.update(extra)
    return payload
