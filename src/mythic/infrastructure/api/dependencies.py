"""API dependencies.

The storage context and the games client are created once by
``create_app`` and kept on ``app.state``; every request gets its own unit
of work from the storage context.
"""

from fastapi import Depends, Request

from mythic.domain.repository.unit_of_work import UnitOfWork
from mythic.infrastructure.external.f2p_client import FreeToGameClient
from mythic.infrastructure.persistence.database import StorageContext


def get_storage(request: Request) -> StorageContext:
    return request.app.state.storage


def get_uow(storage: StorageContext = Depends(get_storage)) -> UnitOfWork:
    return storage.unit_of_work()


def get_f2p_client(request: Request) -> FreeToGameClient:
    return request.app.state.f2p_client
