"""FastAPI main application."""

from typing import Optional, Union

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .. import __version__
from ..config import settings
from ..core.generator import DungeonConfig, DungeonGenerator
from ..core.geometry import DegenerateGeometryError
from ..core.rooms import RoomPlacementFailed
from ..export import dungeon_to_dict
from ..logging_config import configure_logging

configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

app = FastAPI(
    title="Dungeon Generator API",
    description="Procedural room-and-hallway dungeon generation",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class DungeonRequest(BaseModel):
    """Request to generate a dungeon."""

    width: int = Field(settings.default_level_width, ge=4, le=settings.max_level_size,
                       description="Level width in cells")
    height: int = Field(settings.default_level_height, ge=4, le=settings.max_level_size,
                        description="Level height in cells")
    room_count: int = Field(settings.default_room_count, ge=0, le=settings.max_room_count,
                            description="Number of rooms")
    room_min_width: int = Field(settings.default_room_min_size, ge=1, description="Minimum room width")
    room_min_height: int = Field(settings.default_room_min_size, ge=1, description="Minimum room height")
    room_max_width: int = Field(settings.default_room_max_size, ge=1, description="Maximum room width")
    room_max_height: int = Field(settings.default_room_max_size, ge=1, description="Maximum room height")
    seed: Optional[Union[int, str]] = Field(0, description="Random seed for reproducible generation")
    hallway_probability: float = Field(settings.hallway_retention_probability, ge=0.0, le=1.0,
                                       description="Chance of keeping each non-tree edge")


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Dungeon Generator API",
        "version": __version__,
        "status": "running",
    }


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/dungeons/generate")
def generate(request: DungeonRequest):
    """
    Generate a dungeon synchronously.

    Each request builds its own generator, grid and random stream.
    """
    logger.info("Dungeon generation requested", request=request.model_dump())

    try:
        config = DungeonConfig.from_settings(
            width=request.width,
            height=request.height,
            room_count=request.room_count,
            room_min_size=(request.room_min_width, request.room_min_height),
            room_max_size=(request.room_max_width, request.room_max_height),
            seed=request.seed if request.seed is not None else 0,
            hallway_probability=request.hallway_probability,
        )
        dungeon = DungeonGenerator(config).generate()
    except RoomPlacementFailed as e:
        logger.warning("Room placement failed", error=str(e))
        raise HTTPException(status_code=422, detail=str(e))
    except DegenerateGeometryError as e:
        logger.error("Triangulation failed", error=str(e))
        raise HTTPException(status_code=500, detail=str(e))
    except ValueError as e:
        logger.warning("Invalid dungeon request", error=str(e))
        raise HTTPException(status_code=422, detail=str(e))

    return dungeon_to_dict(dungeon)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
