from fastapi import APIRouter

from sample_bank.clients.router import router as clients_router

api_router = APIRouter()

api_router.include_router(clients_router)
