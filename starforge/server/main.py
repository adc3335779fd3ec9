"""FastAPI server for Starforge.

Exposes galaxy creation, inspection, reshaping, renaming and deletion over
HTTP, backed by in-memory repositories.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import JSONResponse

from ..config import Settings
from ..engine.commands import GalaxyCommands
from ..repositories.memory import InMemoryUnitOfWorkFactory
from ..utils.errors import StarforgeError
from .schemas.requests import (
    ChangeGalaxyShapeRequest,
    CreateGalaxyRequest,
    RenameGalaxyRequest,
)
from .schemas.responses import ErrorResponse, GalaxyResponse, GalaxyTreeResponse

settings = Settings.from_env()

# Configure logging
logging.basicConfig(
    level=settings.log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Global store and commands
uow_factory = InMemoryUnitOfWorkFactory()
commands = GalaxyCommands(uow_factory, seed=settings.seed)


def get_commands() -> GalaxyCommands:
    return commands


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    logger.info("Starforge server starting...")
    yield
    logger.info("Starforge server shutting down...")


app = FastAPI(
    title="Starforge API",
    description="Procedural generation of galaxies and their celestial bodies",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(StarforgeError)
async def starforge_error_handler(request: Request, exc: StarforgeError):
    """Map engine errors to their catalog HTTP status."""
    if exc.http_status >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code}", exc_info=exc)
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.code} {exc.meta}")
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


# ============================================
# API ENDPOINTS
# ============================================

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}


@app.get("/api")
async def api_root():
    """API root endpoint - server health check."""
    return {
        "service": "Starforge",
        "status": "operational",
        "galaxies": uow_factory.store.count("galaxy"),
    }


@app.post(
    "/api/galaxies",
    response_model=GalaxyResponse,
    status_code=201,
    responses={**ERROR_RESPONSES, 409: {"model": ErrorResponse}},
)
async def create_galaxy(
    request: CreateGalaxyRequest, cmds: GalaxyCommands = Depends(get_commands)
):
    """Create a galaxy and generate all of its systems.

    Example:
        POST /api/galaxies
        {
          "ownerId": "6f1c8d2e-0b7a-4c55-9d3e-2a41f0c9b8e7",
          "name": "Andromeda",
          "shape": "5-arm spiral",
          "systemCount": 10
        }
    """
    galaxy = await cmds.create_galaxy(
        owner_id=request.ownerId,
        name=request.name,
        shape=request.shape,
        system_count=request.systemCount,
    )
    return GalaxyResponse.from_galaxy(galaxy)


@app.get(
    "/api/galaxies/{galaxy_id}", response_model=GalaxyTreeResponse, responses=ERROR_RESPONSES
)
async def get_galaxy(galaxy_id: str, cmds: GalaxyCommands = Depends(get_commands)):
    """Return the galaxy with its full tree of systems and bodies."""
    tree = await cmds.populate_galaxy(galaxy_id)
    return GalaxyTreeResponse.from_tree(tree)


@app.patch(
    "/api/galaxies/{galaxy_id}/shape", response_model=GalaxyResponse, responses=ERROR_RESPONSES
)
async def change_galaxy_shape(
    galaxy_id: str,
    request: ChangeGalaxyShapeRequest,
    cmds: GalaxyCommands = Depends(get_commands),
):
    """Reshape a galaxy; existing systems are moved, not recreated."""
    galaxy = await cmds.change_galaxy_shape(galaxy_id, request.shape)
    return GalaxyResponse.from_galaxy(galaxy)


@app.patch(
    "/api/galaxies/{galaxy_id}/name",
    response_model=GalaxyResponse,
    responses={**ERROR_RESPONSES, 409: {"model": ErrorResponse}},
)
async def rename_galaxy(
    galaxy_id: str,
    request: RenameGalaxyRequest,
    cmds: GalaxyCommands = Depends(get_commands),
):
    galaxy = await cmds.rename_galaxy(galaxy_id, request.name)
    return GalaxyResponse.from_galaxy(galaxy)


@app.delete("/api/galaxies/{galaxy_id}", status_code=204, responses=ERROR_RESPONSES)
async def delete_galaxy(galaxy_id: str, cmds: GalaxyCommands = Depends(get_commands)):
    """Delete a galaxy and every entity under it."""
    await cmds.delete_galaxy(galaxy_id)
    return Response(status_code=204)
