"""上传文件命名策略：与用户提供的原始文件名解耦，无共享计数器。"""

from __future__ import annotations

import os
import random
import re
from typing import Optional

from app.packages.school.core.timezone import epoch_millis

_RANDOM_UPPER = 1_000_000_000
_WHITESPACE = re.compile(r"\s+")
_UNSAFE = re.compile(r"[^\w.\-]")

_rng = random.SystemRandom()


def file_extension(original_name: Optional[str]) -> str:
    """返回小写扩展名（含点），没有扩展名时返回空串。"""
    return os.path.splitext(os.path.basename(original_name or ""))[1].lower()


def sanitize_original_name(original_name: Optional[str]) -> str:
    """去掉目录部分，空白替换为下划线，其余不安全字符同样替换。"""
    base = os.path.basename((original_name or "").replace("\\", "/"))
    base = _WHITESPACE.sub("_", base.strip())
    return _UNSAFE.sub("_", base)


def generate_name(
    prefix: str,
    original_name: Optional[str],
    *,
    keep_original: bool = False,
    millis: Optional[int] = None,
    salt: Optional[int] = None,
) -> str:
    """生成 ``{prefix}-{毫秒时间戳}-{0..1e9 随机数}{扩展名}``。

    ``keep_original`` 为真时改为在末尾追加清洗后的原始文件名，便于追溯来源。
    """
    stamp = epoch_millis() if millis is None else millis
    nonce = _rng.randint(0, _RANDOM_UPPER) if salt is None else salt
    head = f"{prefix}-{stamp}-{nonce}"
    if keep_original:
        cleaned = sanitize_original_name(original_name)
        if cleaned:
            stem, ext = os.path.splitext(cleaned)
            return f"{head}-{stem}{ext.lower()}"
    return f"{head}{file_extension(original_name)}"
