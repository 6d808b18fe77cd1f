"""表单解析：把 multipart 表单中的字符串字段一次性校验为 pydantic 模型。"""

from __future__ import annotations

from typing import Any, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.packages.school.core.exceptions import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def parse_form(schema: Type[SchemaT], **raw: Any) -> SchemaT:
    """忽略未提交（``None``）的字段后校验；失败时转换为业务 ``ValidationError``。

    更新场景下配合 ``model_dump(exclude_unset=True)`` 即可得到部分更新的字段集合。
    """
    values = {key: value for key, value in raw.items() if value is not None}
    try:
        return schema.model_validate(values)
    except PydanticValidationError as exc:
        errors = [
            {
                "field": ".".join(str(part) for part in error.get("loc", ())),
                "message": error.get("msg", ""),
            }
            for error in exc.errors()
        ]
        first = errors[0] if errors else {"field": "form", "message": "invalid value"}
        raise ValidationError(f"Invalid value for '{first['field']}': {first['message']}", data=errors) from exc
