"""常量定义：HTTP 状态码与上传相关的固定取值。"""

HTTP_STATUS_OK = 200
HTTP_STATUS_CREATED = 201
HTTP_STATUS_BAD_REQUEST = 400
HTTP_STATUS_NOT_FOUND = 404
HTTP_STATUS_CONFLICT = 409
HTTP_STATUS_INTERNAL_SERVER_ERROR = 500

# 重复数据沿用原有接口约定返回 400，而非 409
HTTP_STATUS_DUPLICATE = HTTP_STATUS_BAD_REQUEST

# 按资源划分的上传子目录
TEACHER_PHOTO_DIR = "teacher-photos"
WORKER_PHOTO_DIR = "worker-photos"
MANAGING_COMMITTEE_DIR = "managing-committee"
HEADMASTER_PHOTO_DIR = "headmaster-photos"
CIRCULAR_DIR = "circulars"

# 分支默认 Logo 的文件名，位于上传根目录下，永不删除
DEFAULT_BRANCH_LOGO_NAME = "default-branch-logo.png"

# 富文本编辑器插图的文件名前缀；正文只拥有这一类图片
EDITOR_IMAGE_PREFIX = "editor"
