"""模型包初始化，便于统一导入 ORM 实体并触发模型注册。"""

from app.packages.school.models.banner import Banner
from app.packages.school.models.blog import Blog
from app.packages.school.models.branch import Branch
from app.packages.school.models.circular import Circular
from app.packages.school.models.committee import CommitteeMember
from app.packages.school.models.document import Document
from app.packages.school.models.gallery import GalleryPhoto
from app.packages.school.models.headmaster import Headmaster
from app.packages.school.models.slider import Slider
from app.packages.school.models.speech import Speech
from app.packages.school.models.teacher import Teacher
from app.packages.school.models.worker import Worker

__all__ = [
    "Banner",
    "Blog",
    "Branch",
    "Circular",
    "CommitteeMember",
    "Document",
    "GalleryPhoto",
    "Headmaster",
    "Slider",
    "Speech",
    "Teacher",
    "Worker",
]
