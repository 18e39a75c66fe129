"""
Top-level router for version 1 of the API.

This router aggregates domain-specific routers under a unified
prefix.  The post store is the only domain; its routes are mounted at
``/posts`` as expected by existing front-end clients.
"""

from fastapi import APIRouter

from .endpoints import posts

router = APIRouter()

router.include_router(posts.router, prefix="/posts", tags=["posts"])
