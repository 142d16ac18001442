"""
Process-scoped resources shared by every bounded context.

The engine and the asset storage are created once in the application
lifespan and stored on ``app.state``; routes reach them through these
dependencies.
"""

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine

from app.domain.showcase.ports import AssetStorage


def get_engine(request: Request) -> AsyncEngine:
    """Return the application's database engine."""
    return request.app.state.engine


def get_asset_storage(request: Request) -> AssetStorage:
    """Return the application's remote asset storage."""
    return request.app.state.asset_storage
