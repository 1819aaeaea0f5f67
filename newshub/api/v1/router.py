"""API v1 main router - aggregates all endpoint routers."""

from fastapi import APIRouter

from newshub.api.v1 import admin, articles, navigation

api_router = APIRouter()

api_router.include_router(articles.router, prefix="/articles", tags=["articles"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
api_router.include_router(navigation.router, prefix="/navigation", tags=["navigation"])
