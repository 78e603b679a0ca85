# app/api/__init__.py
from fastapi import APIRouter
from app.api.routers import users, health

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(users.router)
