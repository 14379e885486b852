"""API routes mounted under API_PREFIX."""

from fastapi import APIRouter

from app.api import auth

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["auth"])
