"""Health Probe — liveness endpoint plus the active fault configuration.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up
    - enabled_issues reports exactly the injector's enabled set, sorted

Design Decisions:
    - Fault configuration exposed on the health probe so a client under test
      can tell which misbehaviors to expect without reading server env
"""

from fastapi import APIRouter, Request, status

router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_NAME = "faultapi"
SERVICE_VERSION = "1.0.0"


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(request: Request):
    """Basic liveness probe. Returns 200 if the process is up."""
    injector = request.app.state.injector
    services = request.app.state.services
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "enabled_issues": sorted(
            issue.value for issue in injector.enabled_issues
        ),
        "resources": [
            {
                "name": service.name,
                "path": service.definition.path,
                "records": len(service.store),
                "fields": service.schema.to_dict(),
            }
            for service in services.values()
        ],
    }
