"""System Routes — maintenance endpoints (demo data seeding)."""

from fastapi import APIRouter, Depends, status

from newsdesk.api.dependencies import get_seed_service
from newsdesk.schemas.system import SeedResponse
from newsdesk.services.seed_service import SeedService

router = APIRouter(prefix="/api/v1/system", tags=["system"])


@router.post("/seed", response_model=SeedResponse, status_code=status.HTTP_201_CREATED)
async def seed(service: SeedService = Depends(get_seed_service)):
    """Load demo accounts, categories, tags and articles into an empty database."""
    return await service.seed()
