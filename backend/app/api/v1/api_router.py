# backend/app/api/v1/api_router.py
from fastapi import APIRouter

from .endpoints import command, game, save

# This router will be included with a prefix like /api/v1 by main.py
api_router = APIRouter()

api_router.include_router(game.router, prefix="/game", tags=["Games"])
api_router.include_router(command.router, prefix="/command", tags=["Commands"])
api_router.include_router(save.router, prefix="/save", tags=["Saves"])
