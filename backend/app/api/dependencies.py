"""Route Dependencies — resolve the store, invalidator and services for a request.

Invariants:
    - The store and invalidator live on app.state, set by the lifespan in main.py
    - Services are built per request from those handles
    - Tests swap handles via app.dependency_overrides[get_store] / [get_invalidator]
"""

from fastapi import Depends, Request

from app.config import get_settings
from app.core.repository_protocols import InvoiceStore, PathInvalidator
from app.services.mutation_service import MutationService
from app.services.query_service import QueryService


def get_store(request: Request) -> InvoiceStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Store not initialized")
    return store


def get_invalidator(request: Request) -> PathInvalidator:
    invalidator = getattr(request.app.state, "invalidator", None)
    if invalidator is None:
        raise RuntimeError("Invalidator not initialized")
    return invalidator


def get_query_service(store: InvoiceStore = Depends(get_store)) -> QueryService:
    return QueryService(
        store, revenue_delay_seconds=get_settings().revenue_delay_seconds,
    )


def get_mutation_service(
    store: InvoiceStore = Depends(get_store),
    invalidator: PathInvalidator = Depends(get_invalidator),
) -> MutationService:
    return MutationService(store, invalidator)
