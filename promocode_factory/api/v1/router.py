from fastapi import APIRouter

from promocode_factory.api.routers import partners

api_router = APIRouter()

api_router.include_router(partners.router)
