from fastapi import APIRouter

from json_response.api.endpoints import demo

router = APIRouter()
router.include_router(demo.router, tags=["demo"])
