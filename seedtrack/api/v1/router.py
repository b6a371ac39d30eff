from fastapi import APIRouter

from seedtrack.api.v1.endpoints import plants, settings, tasks, templates

api_router = APIRouter()

api_router.include_router(templates.router)
api_router.include_router(plants.router)
api_router.include_router(tasks.router)
api_router.include_router(settings.router)
