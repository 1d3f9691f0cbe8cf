from fastapi import APIRouter

from api.routes.intl import router as intl_router
from api.routes.system import router as system_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(intl_router)
