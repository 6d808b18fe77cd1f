"""API v1 汇总路由：统一挂载所有资源子路由。"""

from fastapi import APIRouter

from app.packages.school.api.v1.endpoints import (
    banners,
    blogs,
    branches,
    circulars,
    committee,
    documents,
    gallery,
    headmasters,
    maintenance,
    sliders,
    speeches,
    teachers,
    workers,
)

api_router = APIRouter()
api_router.include_router(banners.router)
api_router.include_router(blogs.router)
api_router.include_router(documents.router)
api_router.include_router(speeches.router)
api_router.include_router(branches.router)
api_router.include_router(teachers.router)
api_router.include_router(workers.router)
api_router.include_router(headmasters.router)
api_router.include_router(committee.router)
api_router.include_router(circulars.router)
api_router.include_router(sliders.router)
api_router.include_router(gallery.router)
api_router.include_router(maintenance.router)
