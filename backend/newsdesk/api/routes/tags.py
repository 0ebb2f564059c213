"""Tag Routes — CRUD over tags; deletion refused while a tag is attached."""

from fastapi import APIRouter, Depends, status

from newsdesk.api.dependencies import get_query_spec, get_tag_service
from newsdesk.core.query_engine import QuerySpec
from newsdesk.schemas.pagination import PageResponse
from newsdesk.schemas.tag import TagResponse, TagWrite
from newsdesk.services.tag_service import TagService

router = APIRouter(prefix="/api/v1/tags", tags=["tags"])


@router.get("", response_model=PageResponse[TagResponse])
async def list_tags(
    query: QuerySpec = Depends(get_query_spec),
    service: TagService = Depends(get_tag_service),
):
    return PageResponse[TagResponse].from_result(await service.list_tags(query))


@router.get("/{tag_id}", response_model=TagResponse)
async def get_tag(tag_id: int, service: TagService = Depends(get_tag_service)):
    return await service.get_tag(tag_id)


@router.post("", response_model=TagResponse, status_code=status.HTTP_201_CREATED)
async def create_tag(body: TagWrite, service: TagService = Depends(get_tag_service)):
    return await service.create_tag(body)


@router.put("/{tag_id}", response_model=TagResponse)
async def update_tag(
    tag_id: int, body: TagWrite, service: TagService = Depends(get_tag_service),
):
    return await service.update_tag(tag_id, body)


@router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tag(tag_id: int, service: TagService = Depends(get_tag_service)):
    await service.delete_tag(tag_id)
