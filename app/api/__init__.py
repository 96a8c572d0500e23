from fastapi import APIRouter
from app.api.finance import router as finance_router

api_router = APIRouter()
api_router.include_router(finance_router, prefix="/finance", tags=["finance"])
