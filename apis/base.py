from fastapi import APIRouter
from apis.v1.route_validate import router as validate_router

api_router = APIRouter()
api_router.include_router(validate_router, prefix="/api/validate", tags=["validate"])
