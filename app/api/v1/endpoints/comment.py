import logging

from fastapi import APIRouter, Depends, status
from pymongo.asynchronous.database import AsyncDatabase

from app.core.config import settings
from app.core.exceptions import BadRequestException
from app.db.session import get_database
from app.schemas.book_schema import MessageResponse
from app.schemas.comment_schema import CommentDto
from app.services.comment_service import comment_service


logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Comments"],
    prefix=f"{settings.API_V1_STR}/comment",
)


@router.get(
    "/{comment_id}",
    response_model=CommentDto,
    status_code=status.HTTP_200_OK,
    summary="Get comment by id",
)
async def get_comment(*, comment_id: str, db: AsyncDatabase = Depends(get_database)):
    comment = await comment_service.find_by_id(db, comment_id=comment_id)
    return CommentDto.from_entity(comment)


@router.post(
    "",
    response_model=CommentDto,
    status_code=status.HTTP_200_OK,
    summary="Comment on a book",
    description="Add a comment to an existing book",
)
async def create_comment(
    *, comment_dto: CommentDto, db: AsyncDatabase = Depends(get_database)
):
    comment = await comment_service.create(
        db, text=comment_dto.text, book_id=comment_dto.book_id
    )
    return CommentDto.from_entity(comment)


@router.put(
    "",
    response_model=CommentDto,
    status_code=status.HTTP_200_OK,
    summary="Edit a comment",
)
async def update_comment(
    *, comment_dto: CommentDto, db: AsyncDatabase = Depends(get_database)
):
    """Only the text can change; the comment stays on the book it was left on."""
    if not comment_dto.id:
        raise BadRequestException(
            "Comment id is required for update", resource_type="Comment"
        )
    comment = await comment_service.update(
        db, comment_id=comment_dto.id, text=comment_dto.text
    )
    return CommentDto.from_entity(comment)


@router.delete(
    "/{comment_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete a comment",
)
async def delete_comment(*, comment_id: str, db: AsyncDatabase = Depends(get_database)):
    await comment_service.delete(db, comment_id=comment_id)
    return MessageResponse(message=f"Comment: {comment_id} deleted!")
