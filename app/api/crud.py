"""
REST resources with the generic create/update/list/get/delete contract.

    POST   /<path>        create; 400 when the body already carries an id
    PUT    /<path>        update; behaves as create when the body has no id
    GET    /<path>        list every row
    GET    /<path>/{id}   one row or 404
    DELETE /<path>/{id}   delete, 200 whether or not the row existed

Success and failure are also reported through the alert headers built in
app.core.headers.
"""

import logging
from typing import Callable, List, Optional, Type

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.api.auth import get_current_user
from app.api.deps import get_db_dependency
from app.core.config import settings
from app.core.errors import bad_request_alert, not_found
from app.core.headers import entity_creation_alert, entity_deletion_alert, entity_update_alert
from app.repositories.base import CrudRepository

logger = logging.getLogger(__name__)

EntityHook = Callable[[Session, object], None]


def build_crud_router(
    *,
    path: str,
    entity_name: str,
    repository: CrudRepository,
    schema_in: Type[BaseModel],
    schema_read: Type[BaseModel],
    on_create: Optional[EntityHook] = None,
    on_update: Optional[EntityHook] = None,
    on_delete: Optional[Callable[[object], None]] = None,
) -> APIRouter:
    """
    Build the CRUD router for one entity.

    Args:
        path: Collection path without the API prefix, e.g. "projects"
        entity_name: Name used in alert headers, e.g. "providerEligibility"
        repository: Data access for the entity
        schema_in: Request body model; its optional ``id`` selects create or update
        schema_read: Response model
        on_create: Called with the new entity before it is saved
        on_update: Called with the entity before an update is saved
        on_delete: Called with the deleted entity after the commit

    Returns:
        Router to include under the API prefix
    """
    model = repository.model
    label = model.__name__
    collection = f"/{path}"
    item = f"/{path}/{{id}}"

    router = APIRouter(dependencies=[Depends(get_current_user)])

    def create(payload: schema_in, response: Response, db: Session = Depends(get_db_dependency)):
        logger.debug(f"REST request to save {label} : {payload}")
        if payload.id is not None:
            raise bad_request_alert(entity_name, "idexists", f"A new {entity_name} cannot already have an ID")
        entity = model(**payload.model_dump(exclude={"id"}))
        if on_create:
            on_create(db, entity)
        result = repository.save(db, entity)
        response.status_code = 201
        response.headers["Location"] = f"{settings.API_PREFIX}{collection}/{result.id}"
        response.headers.update(entity_creation_alert(entity_name, result.id))
        return schema_read.model_validate(result)

    def update(payload: schema_in, response: Response, db: Session = Depends(get_db_dependency)):
        logger.debug(f"REST request to update {label} : {payload}")
        if payload.id is None:
            return create(payload, response, db)
        entity = model(**payload.model_dump())
        if on_update:
            on_update(db, entity)
        result = repository.save(db, entity)
        response.headers.update(entity_update_alert(entity_name, result.id))
        return schema_read.model_validate(result)

    def list_all(db: Session = Depends(get_db_dependency)):
        logger.debug(f"REST request to get all {label}s")
        return [schema_read.model_validate(e) for e in repository.find_all(db)]

    def get_one(id: int, db: Session = Depends(get_db_dependency)):
        logger.debug(f"REST request to get {label} : {id}")
        entity = repository.find_one(db, id)
        if entity is None:
            raise not_found(label)
        return schema_read.model_validate(entity)

    def delete(id: int, db: Session = Depends(get_db_dependency)):
        logger.debug(f"REST request to delete {label} : {id}")
        deleted = repository.delete(db, id)
        if deleted is not None and on_delete:
            on_delete(deleted)
        return Response(status_code=200, headers=entity_deletion_alert(entity_name, id))

    name = path.replace("-", "_")
    router.add_api_route(collection, create, methods=["POST"], response_model=schema_read, status_code=201, name=f"create_{name}")
    router.add_api_route(collection, update, methods=["PUT"], response_model=schema_read, name=f"update_{name}")
    router.add_api_route(collection, list_all, methods=["GET"], response_model=List[schema_read], name=f"list_{name}")
    router.add_api_route(item, get_one, methods=["GET"], response_model=schema_read, name=f"get_{name}")
    router.add_api_route(item, delete, methods=["DELETE"], name=f"delete_{name}")
    return router
