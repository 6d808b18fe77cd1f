"""上传闸门：在任何文件落盘之前校验 MIME 类型、扩展名与大小。

判定规则：MIME 位于白名单 **或** 小写扩展名位于白名单即放行
（部分客户端对 Office 文件上报的 MIME 不可靠）；仅图片策略要求 ``image/*``。
"""

from __future__ import annotations

from dataclasses import dataclass, field as dc_field
from typing import Iterable, Optional, Sequence

from fastapi import UploadFile

from app.packages.school.core.config import get_settings
from app.packages.school.core.exceptions import ValidationError
from app.packages.school.services.naming import file_extension

IMAGE_MIME_TYPES = frozenset(
    {
        "image/jpeg",
        "image/jpg",
        "image/png",
        "image/gif",
        "image/webp",
        "image/bmp",
        "image/svg+xml",
    }
)
IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp", ".svg"})

DOCUMENT_MIME_TYPES = frozenset(
    {
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/vnd.ms-excel",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "application/vnd.ms-powerpoint",
        "application/vnd.openxmlformats-officedocument.presentationml.presentation",
        "text/plain",
        "text/csv",
        "application/octet-stream",
    }
)
DOCUMENT_EXTENSIONS = frozenset(
    {".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx", ".txt", ".csv"}
)


@dataclass(frozen=True)
class UploadPolicy:
    name: str
    max_size: int
    mime_types: frozenset[str] = dc_field(default_factory=frozenset)
    extensions: frozenset[str] = dc_field(default_factory=frozenset)
    image_only: bool = False

    def allows(self, content_type: str, filename: str) -> bool:
        if self.image_only:
            return content_type.startswith("image/")
        return content_type in self.mime_types or file_extension(filename) in self.extensions


@dataclass(frozen=True)
class IncomingFile:
    """通过闸门校验、尚未落盘的上传文件。"""

    field: str
    original_name: str
    content_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def extension(self) -> str:
        return file_extension(self.original_name)


_settings = get_settings()

GENERAL_POLICY = UploadPolicy(
    name="general",
    max_size=_settings.max_upload_size,
    mime_types=IMAGE_MIME_TYPES | DOCUMENT_MIME_TYPES,
    extensions=IMAGE_EXTENSIONS | DOCUMENT_EXTENSIONS,
)
IMAGE_POLICY = UploadPolicy(
    name="image",
    max_size=_settings.max_upload_size,
    mime_types=IMAGE_MIME_TYPES,
    extensions=IMAGE_EXTENSIONS,
)
PHOTO_POLICY = UploadPolicy(name="photo", max_size=_settings.max_photo_size, image_only=True)


def _format_size(size: int) -> str:
    return f"{size / (1024 * 1024):g} MB"


def _normalize_content_type(raw: Optional[str]) -> str:
    return (raw or "").split(";", 1)[0].strip().lower()


def check_candidate(
    field: str,
    filename: str,
    content_type: str,
    size: Optional[int],
    policy: UploadPolicy,
) -> None:
    """纯校验：不合规时抛出 ``ValidationError``，不产生任何副作用。"""
    if not policy.allows(content_type, filename):
        shown = content_type or "unknown"
        ext = file_extension(filename) or "none"
        raise ValidationError(
            f"File type not allowed for '{field}': {shown} (extension {ext})"
        )
    if size is not None and size > policy.max_size:
        raise ValidationError(
            f"File '{filename}' exceeds the {_format_size(policy.max_size)} limit for '{field}'"
        )


def is_present(upload: Optional[UploadFile]) -> bool:
    """浏览器会为未选择文件的字段提交空文件名的部分，视同未上传。"""
    return upload is not None and bool(upload.filename)


def inspect(upload: UploadFile, policy: UploadPolicy, field: str) -> IncomingFile:
    """校验单个上传文件并读入内存，最多读取 ``max_size + 1`` 字节。"""
    filename = upload.filename or ""
    content_type = _normalize_content_type(upload.content_type)
    check_candidate(field, filename, content_type, getattr(upload, "size", None), policy)

    content = upload.file.read(policy.max_size + 1)
    check_candidate(field, filename, content_type, len(content), policy)
    if not content:
        raise ValidationError(f"Uploaded file '{filename}' for '{field}' is empty")
    return IncomingFile(field=field, original_name=filename, content_type=content_type, content=content)


def inspect_many(
    uploads: Optional[Iterable[Optional[UploadFile]]],
    policy: UploadPolicy,
    field: str,
    *,
    max_files: Optional[int] = None,
) -> list[IncomingFile]:
    """校验同一字段下的多个文件；任何一个不合规则整体拒绝。"""
    present: Sequence[UploadFile] = [item for item in (uploads or []) if is_present(item)]
    limit = max_files or _settings.max_files_per_request
    if len(present) > limit:
        raise ValidationError(f"At most {limit} files are allowed for '{field}'")
    return [inspect(item, policy, field) for item in present]
