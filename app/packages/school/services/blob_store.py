"""Blob Store：上传文件的持久化抽象与本地文件系统实现。

所有对外暴露的路径都是“公开 URL 路径”，形如 ``/api/uploads/<subdir>/<name>``，
数据库记录中保存的也是该形式；文件系统路径只在本模块内部出现。
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

from app.packages.school.core.exceptions import BlobExistsError, StorageError
from app.packages.school.core.logger import get_logger

logger = get_logger("blob_store")


@dataclass(frozen=True)
class BlobInfo:
    path: str
    size: int
    modified_at: datetime


class BlobStore:
    """存储后端接口。"""

    url_prefix: str = "/api/uploads"

    def put(self, content: bytes, name: str, *, subdir: str = "") -> str:
        raise NotImplementedError

    def delete(self, public_path: str) -> bool:
        raise NotImplementedError

    def exists(self, public_path: str) -> bool:
        raise NotImplementedError

    def iter_blobs(self) -> Iterator[BlobInfo]:
        raise NotImplementedError

    def owns(self, public_path: object) -> bool:
        """仅凭前缀判断路径是否位于受管目录，不访问文件系统。"""
        return isinstance(public_path, str) and public_path.startswith(self.url_prefix + "/")

    def public_path(self, name: str, subdir: str = "") -> str:
        parts = [self.url_prefix.rstrip("/")]
        if subdir:
            parts.append(subdir.strip("/"))
        parts.append(name)
        return "/".join(parts)


class LocalBlobStore(BlobStore):
    """本地目录实现：根目录与子目录按需创建，写入时不覆盖已有文件。"""

    def __init__(self, root: str | os.PathLike, url_prefix: str = "/api/uploads"):
        self.root = Path(root).resolve()
        self.url_prefix = "/" + url_prefix.strip("/")

    # 统一的安全路径拼接，防止路径遍历
    def _within_root(self, candidate: Path) -> Path:
        resolved = candidate.resolve()
        try:
            resolved.relative_to(self.root)
        except ValueError as exc:
            raise StorageError("Illegal upload path") from exc
        return resolved

    def _resolve(self, public_path: str) -> Path:
        if not self.owns(public_path):
            raise StorageError("Path is outside managed upload storage")
        relative = public_path[len(self.url_prefix) + 1:]
        return self._within_root(self.root / relative)

    def put(self, content: bytes, name: str, *, subdir: str = "") -> str:
        safe_name = os.path.basename(name.strip())
        if not safe_name:
            raise StorageError("Blob name must not be empty")
        directory = self._within_root(self.root / subdir) if subdir else self.root
        target = directory / safe_name
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with open(target, "xb") as handle:
                handle.write(content)
        except FileExistsError as exc:
            raise BlobExistsError(f"Upload name already taken: {safe_name}") from exc
        except OSError as exc:
            logger.exception("Failed to write upload %s", target)
            raise StorageError("Failed to store uploaded file") from exc
        path = self.public_path(safe_name, subdir)
        logger.debug("Stored blob %s (%d bytes)", path, len(content))
        return path

    def delete(self, public_path: str) -> bool:
        target = self._resolve(public_path)
        try:
            target.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise StorageError(f"Failed to delete uploaded file: {public_path}") from exc
        logger.info("Deleted blob %s", public_path)
        return True

    def exists(self, public_path: str) -> bool:
        try:
            return self._resolve(public_path).is_file()
        except StorageError:
            return False

    def iter_blobs(self) -> Iterator[BlobInfo]:
        if not self.root.is_dir():
            return
        for entry in sorted(self.root.rglob("*")):
            if not entry.is_file():
                continue
            stat = entry.stat()
            relative = entry.relative_to(self.root).as_posix()
            yield BlobInfo(
                path=f"{self.url_prefix}/{relative}",
                size=int(stat.st_size),
                modified_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
            )
