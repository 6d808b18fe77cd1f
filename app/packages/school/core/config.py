"""配置模块：负责加载和缓存基于环境变量的应用设置。"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_TRUTHY = {"1", "true", "yes", "on"}

# 项目根目录：向上找到第一个包含 ``app`` 目录的祖先
BASE_DIR = next(
    (parent for parent in Path(__file__).resolve().parents if (parent / "app").is_dir()),
    Path(__file__).resolve().parent,
)


def _env_files() -> list[Path]:
    """按加载顺序返回环境文件：``ENV_FILE`` 独占；否则 ``.env`` 之后叠加 ``.env.<ENVIRONMENT>``。"""
    explicit = os.getenv("ENV_FILE")
    if explicit:
        return [BASE_DIR / explicit]

    files = [BASE_DIR / ".env"]
    environment = os.getenv("ENVIRONMENT")
    if environment is None and (os.getenv("DEBUG") or "").strip().lower() in _TRUTHY:
        environment = "development"
    if environment:
        files.append(BASE_DIR / (environment if environment.startswith(".env") else f".env.{environment}"))
    return files


for _env_file in _env_files():
    if _env_file.is_file():
        # 基础 .env 不覆盖进程环境，环境专属文件覆盖
        load_dotenv(_env_file, override=_env_file.name != ".env", encoding="utf-8")

MIB = 1024 * 1024


class Settings(BaseSettings):
    """
    封装应用运行所需的所有配置项，每个字段都可以通过环境变量重写。
    上传目录、公开访问前缀与大小上限集中在此，避免在各资源模块中散落魔法数字。
    """

    project_name: str = Field(default="School Admin API", alias="PROJECT_NAME")
    api_prefix: str = Field(default="/api", alias="API_PREFIX")
    debug: bool = Field(default=False, alias="DEBUG")

    database_url: Optional[str] = Field(default=None, alias="DATABASE_URL")
    database_host: str = Field(default="localhost", alias="DATABASE_HOST")
    database_port: int = Field(default=5432, alias="DATABASE_PORT")
    database_user: str = Field(default="postgres", alias="DATABASE_USER")
    database_password: str = Field(default="postgres", alias="DATABASE_PASSWORD")
    database_name: str = Field(default="school_admin", alias="DATABASE_NAME")
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO")

    # 上传文件（Blob Store）
    upload_dir: str = Field(default="uploads", alias="UPLOAD_DIR")
    upload_url_prefix: str = Field(default="/api/uploads", alias="UPLOAD_URL_PREFIX")
    max_upload_size: int = Field(default=10 * MIB, alias="MAX_UPLOAD_SIZE")
    max_photo_size: int = Field(default=2 * MIB, alias="MAX_PHOTO_SIZE")
    max_files_per_request: int = Field(default=10, alias="MAX_FILES_PER_REQUEST")
    orphan_grace_seconds: int = Field(default=3600, alias="ORPHAN_GRACE_SECONDS")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: str = Field(default="log", alias="LOG_DIR")
    log_file_name: str = Field(default="app.log", alias="LOG_FILE_NAME")
    log_json: bool = Field(default=False, alias="LOG_JSON")
    app_port: int = Field(default=8000, alias="APP_PORT")
    timezone: str = Field(default="Asia/Dhaka", alias="TIMEZONE")

    model_config = SettingsConfigDict(extra='ignore')

    @property
    def sql_database_url(self) -> str:
        """优先使用 ``DATABASE_URL``，否则根据分项设置拼接 PostgreSQL 连接串。"""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.database_user}:{self.database_password}"
            f"@{self.database_host}:{self.database_port}/{self.database_name}"
        )

    def _resolve_path(self, raw: str) -> Path:
        path = Path(raw)
        if not path.is_absolute():
            path = BASE_DIR / path
        return path

    @property
    def upload_directory(self) -> Path:
        """返回上传根目录的绝对路径，支持相对路径配置。"""
        return self._resolve_path(self.upload_dir)

    @property
    def upload_url_root(self) -> str:
        """规范化后的公开访问前缀，形如 ``/api/uploads``（无尾部斜杠）。"""
        return "/" + self.upload_url_prefix.strip("/")

    @property
    def log_directory(self) -> Path:
        """返回日志目录的绝对路径，支持相对路径配置。"""
        return self._resolve_path(self.log_dir)

    @property
    def log_file_path(self) -> Path:
        """组合日志目录与文件名，得到完整的日志文件路径。"""
        return self.log_directory / self.log_file_name

    @property
    def timezone_info(self) -> ZoneInfo:
        """返回当前配置对应的时区信息，无法解析时回退到 UTC。"""
        try:
            return ZoneInfo(self.timezone)
        except ZoneInfoNotFoundError:
            return ZoneInfo("UTC")


@lru_cache
def get_settings() -> Settings:
    """返回单例化的配置对象，避免重复解析环境变量造成性能浪费。"""
    return Settings()
