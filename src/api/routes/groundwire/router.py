"""Router do Groundwire — agrega endpoints do softphone."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.groundwire.balance import router as balance_router

router = APIRouter()
router.include_router(balance_router)
