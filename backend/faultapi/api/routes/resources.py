"""Resource Routes — CRUD endpoints generated from a resource definition.

Invariants:
    - One router per ResourceService, prefixed with the definition's path
    - Request bodies are read raw: decoding and validation belong to the pipeline
    - Path ids are taken as strings so a non-integer id is a 404, not a 422
    - POST answers 201 with {"id": n}; PUT and DELETE answer 200 with an empty body

Design Decisions:
    - Router factory with the service captured in a closure: routes stay thin
      and each resource keeps its own store without module-level state
    - Errors propagate as EmulatorError and are rendered by the global handlers
"""

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from faultapi.core.domain_types import RECORD_ID_FIELD
from faultapi.services.resource_service import ResourceService


def build_resource_router(service: ResourceService) -> APIRouter:
    """Create POST/GET/PUT/DELETE routes for one resource."""
    definition = service.definition
    item_path = "/{" + definition.id_param + "}"
    router = APIRouter(prefix=definition.path, tags=[definition.name])

    @router.post(
        "", status_code=status.HTTP_201_CREATED, name=f"create_{definition.name}",
    )
    async def create_record(request: Request):
        record = service.create(await request.body())
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content={RECORD_ID_FIELD: record[RECORD_ID_FIELD]},
        )

    @router.get(item_path, name=f"read_{definition.name}")
    async def read_record(request: Request):
        return JSONResponse(
            content=service.read(request.path_params[definition.id_param]),
        )

    @router.put(item_path, name=f"update_{definition.name}")
    async def update_record(request: Request):
        service.update(
            await request.body(), request.path_params[definition.id_param],
        )
        return Response(status_code=status.HTTP_200_OK)

    @router.delete(item_path, name=f"delete_{definition.name}")
    async def delete_record(request: Request):
        service.delete(request.path_params[definition.id_param])
        return Response(status_code=status.HTTP_200_OK)

    return router
