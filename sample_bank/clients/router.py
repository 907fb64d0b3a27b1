import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from sample_bank.database import get_db
from sample_bank.clients.schemas import ClientPayload, ClientResponse
from sample_bank.clients.service import ClientService
from sample_bank.exceptions import ClientNotFoundError
from sample_bank.shared.schemas import INT64_MAX, INT64_MIN

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/accounts", tags=["accounts"])

ClientId = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]


@router.get("", response_model=List[ClientResponse])
async def list_clients(db: AsyncSession = Depends(get_db)):
    service = ClientService(db)
    return await service.find_all()


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(client: ClientPayload, db: AsyncSession = Depends(get_db)):
    service = ClientService(db)
    # Always an insert, whatever id the body carries
    return await service.save(client.model_copy(update={"id": 0}))


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(client_id: ClientId, db: AsyncSession = Depends(get_db)):
    service = ClientService(db)
    return await service.find_by_id(client_id)


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(client_id: ClientId, client: ClientPayload, db: AsyncSession = Depends(get_db)):
    service = ClientService(db)
    if not await service.exists(client_id):
        raise ClientNotFoundError(client_id)
    if client.id and client.id != client_id:
        logger.info("Ignoring body id %s in favour of path id %s", client.id, client_id)
    return await service.save(client.model_copy(update={"id": client_id}))


@router.delete("/{client_id}")
async def delete_client(client_id: ClientId, db: AsyncSession = Depends(get_db)):
    service = ClientService(db)
    await service.delete_by_id(client_id)
    return Response(status_code=status.HTTP_200_OK)
