"""富文本图片引用提取。

依赖 ``<img ... src="...">`` 的固定写法（双引号），属于字符串抓取而非 HTML 解析；
单独成模块以便单测覆盖其边界。
"""

from __future__ import annotations

import re
from typing import Optional

IMG_SRC_PATTERN = re.compile(r'<img[^>]+src="([^">]+)"', re.IGNORECASE)


def extract_managed_image_refs(html: Optional[str], storage_prefix: str) -> list[str]:
    """返回正文中指向受管上传目录的图片路径，去重并保持出现顺序。

    外链、base64 内联图片与其它前缀的路径一律忽略。
    """
    if not html:
        return []
    prefix = "/" + storage_prefix.strip("/") + "/"
    seen: dict[str, None] = {}
    for match in IMG_SRC_PATTERN.finditer(html):
        src = match.group(1).strip()
        if src.startswith(prefix) and ".." not in src:
            seen.setdefault(src, None)
    return list(seen)
