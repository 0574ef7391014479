"""
Comment Handler

Comment endpoints of the blog service.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from inkpost.api.dependencies.auth import CurrentUser
from inkpost.api.dependencies.services import get_comment_service
from inkpost.shared.schemas.comment import (
    CommentCreate,
    CommentCreatedResponse,
    CommentResponse,
)
from inkpost.shared.schemas.common import MessageResponse
from inkpost.shared.services.comment_service import CommentService


router = APIRouter()


@router.post(
    "/comment/{blog_id}",
    response_model=CommentCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    blog_id: int,
    data: CommentCreate,
    current_user: CurrentUser,
    comment_service: CommentService = Depends(get_comment_service),
):
    """
    Comment on a blog as the caller.

    Raises:
        404: If the blog does not exist
    """
    comment = await comment_service.add_comment(
        blog_id=blog_id,
        user_id=current_user["user_id"],
        username=current_user["name"],
        text=data.comment,
    )
    return CommentCreatedResponse(
        message="Comment Added",
        comment=CommentResponse.model_validate(comment),
    )


@router.get("/comment/{blog_id}", response_model=List[CommentResponse])
async def list_comments(
    blog_id: int,
    comment_service: CommentService = Depends(get_comment_service),
):
    """
    Comments on a blog, newest first.
    """
    comments = await comment_service.list_comments(blog_id)
    return [CommentResponse.model_validate(comment) for comment in comments]


@router.delete("/comment/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    comment_id: int,
    current_user: CurrentUser,
    comment_service: CommentService = Depends(get_comment_service),
):
    """
    Delete a comment the caller wrote.

    Raises:
        403: If the caller did not write it
        404: If the comment does not exist
    """
    await comment_service.delete_comment(comment_id, current_user["user_id"])
    return MessageResponse(message="Comment Deleted")
