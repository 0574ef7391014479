"""
Author Handler

Blog authoring endpoints of the author service. Requests are multipart
forms because they carry the cover image alongside the text fields.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from inkpost.api.dependencies.auth import CurrentUser
from inkpost.api.dependencies.services import get_author_service
from inkpost.shared.models.enums import BlogCategory
from inkpost.shared.schemas.blog import BlogMutationResponse, BlogResponse
from inkpost.shared.schemas.common import MessageResponse
from inkpost.shared.services.author_service import AuthorService


router = APIRouter()


@router.post(
    "/blog/new",
    response_model=BlogMutationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_blog(
    current_user: CurrentUser,
    title: str = Form(..., min_length=1, max_length=255),
    description: str = Form(..., min_length=1, max_length=255),
    blogcontent: str = Form(...),
    category: BlogCategory = Form(...),
    file: Optional[UploadFile] = File(None),
    author_service: AuthorService = Depends(get_author_service),
):
    """
    Publish a new blog.

    Raises:
        400: If the cover image is missing or not an image
        422: If a text field is missing or the category is unknown
    """
    blog = await author_service.create_blog(
        author_id=current_user["user_id"],
        title=title,
        description=description,
        blogcontent=blogcontent,
        category=category,
        image_data=await file.read() if file is not None else None,
        image_content_type=file.content_type if file is not None else None,
    )

    return BlogMutationResponse(
        message="Blog Created",
        blog=BlogResponse.model_validate(blog),
    )


@router.post("/blog/{blog_id}", response_model=BlogMutationResponse)
async def update_blog(
    blog_id: int,
    current_user: CurrentUser,
    title: Optional[str] = Form(None, min_length=1, max_length=255),
    description: Optional[str] = Form(None, min_length=1, max_length=255),
    blogcontent: Optional[str] = Form(None),
    category: Optional[BlogCategory] = Form(None),
    file: Optional[UploadFile] = File(None),
    author_service: AuthorService = Depends(get_author_service),
):
    """
    Update a blog the caller wrote. Omitted fields are left unchanged.

    Raises:
        403: If the caller is not the author
        404: If the blog does not exist
    """
    blog = await author_service.update_blog(
        blog_id=blog_id,
        author_id=current_user["user_id"],
        title=title,
        description=description,
        blogcontent=blogcontent,
        category=category,
        image_data=await file.read() if file is not None else None,
        image_content_type=file.content_type if file is not None else None,
    )

    return BlogMutationResponse(
        message="Blog Updated",
        blog=BlogResponse.model_validate(blog),
    )


@router.delete("/blog/{blog_id}", response_model=MessageResponse)
async def delete_blog(
    blog_id: int,
    current_user: CurrentUser,
    author_service: AuthorService = Depends(get_author_service),
):
    """
    Delete a blog the caller wrote, with its comments and bookmarks.

    Raises:
        403: If the caller is not the author
        404: If the blog does not exist
    """
    await author_service.delete_blog(blog_id, current_user["user_id"])
    return MessageResponse(message="Blog Deleted")
