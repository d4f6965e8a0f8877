from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Path, status

from ....application.services.bookmark_service import BookmarkService
from ....core.dependencies import get_bookmark_service
from ....domain.models import User
from ...api.dependencies import get_current_user
from ...api.schemas.bookmark import BookmarkResponse, CreateBookmarkRequest, EditBookmarkRequest

router = APIRouter(prefix="/bookmarks", tags=["Bookmarks"])

# Largest id a SQLite INTEGER column can hold.
MAX_BOOKMARK_ID = 2**63 - 1


@router.post("", response_model=BookmarkResponse, status_code=status.HTTP_201_CREATED)
async def create_bookmark(
    payload: CreateBookmarkRequest,
    user: User = Depends(get_current_user),
    service: BookmarkService = Depends(get_bookmark_service),
) -> BookmarkResponse:
    bookmark = service.create(
        user.id,
        title=payload.title,
        link=payload.link,
        description=payload.description,
    )
    return BookmarkResponse.model_validate(bookmark)


@router.get("", response_model=List[BookmarkResponse])
async def list_bookmarks(
    user: User = Depends(get_current_user),
    service: BookmarkService = Depends(get_bookmark_service),
) -> List[BookmarkResponse]:
    return [BookmarkResponse.model_validate(item) for item in service.list(user.id)]


@router.get("/{bookmark_id}", response_model=BookmarkResponse)
async def get_bookmark(
    bookmark_id: int = Path(..., ge=1, le=MAX_BOOKMARK_ID),
    user: User = Depends(get_current_user),
    service: BookmarkService = Depends(get_bookmark_service),
) -> BookmarkResponse:
    return BookmarkResponse.model_validate(service.get_by_id(user.id, bookmark_id))


@router.put("/{bookmark_id}", response_model=BookmarkResponse)
async def update_bookmark(
    payload: EditBookmarkRequest,
    bookmark_id: int = Path(..., ge=1, le=MAX_BOOKMARK_ID),
    user: User = Depends(get_current_user),
    service: BookmarkService = Depends(get_bookmark_service),
) -> BookmarkResponse:
    bookmark = service.update(user.id, bookmark_id, payload.model_dump(exclude_unset=True))
    return BookmarkResponse.model_validate(bookmark)


@router.delete("/{bookmark_id}", response_model=BookmarkResponse)
async def delete_bookmark(
    bookmark_id: int = Path(..., ge=1, le=MAX_BOOKMARK_ID),
    user: User = Depends(get_current_user),
    service: BookmarkService = Depends(get_bookmark_service),
) -> BookmarkResponse:
    return BookmarkResponse.model_validate(service.delete(user.id, bookmark_id))
