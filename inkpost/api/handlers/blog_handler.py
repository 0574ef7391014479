"""
Blog Handler

Read endpoints of the blog service plus bookmarks. Listing and detail
responses come from the Redis read-through cache when it is warm.
"""

from typing import List

from fastapi import APIRouter, Depends, Query

from inkpost.api.dependencies.auth import CurrentUser
from inkpost.api.dependencies.services import get_blog_service, get_saved_blog_service
from inkpost.shared.schemas.blog import (
    BlogResponse,
    BlogWithAuthorResponse,
    SavedBlogResponse,
    SaveToggleResponse,
)
from inkpost.shared.services.blog_service import BlogService
from inkpost.shared.services.saved_blog_service import SavedBlogService


router = APIRouter()


@router.get("/blog/all", response_model=List[BlogResponse])
async def list_blogs(
    search_query: str = Query("", alias="searchQuery"),
    category: str = Query(""),
    blog_service: BlogService = Depends(get_blog_service),
):
    """
    List blogs, newest first.

    Args:
        search_query: Matched case-insensitively against title and description
        category: Exact category, or empty for all

    Raises:
        400: If the category is unknown
    """
    return await blog_service.list_blogs(search_query=search_query, category=category)


@router.get("/blog/saved/all", response_model=List[SavedBlogResponse])
async def list_saved_blogs(
    current_user: CurrentUser,
    saved_blog_service: SavedBlogService = Depends(get_saved_blog_service),
):
    """
    List the caller's bookmarks, newest first.
    """
    saves = await saved_blog_service.list_saved(current_user["user_id"])
    return [SavedBlogResponse.model_validate(save) for save in saves]


@router.get("/blog/{blog_id}", response_model=BlogWithAuthorResponse)
async def get_blog(
    blog_id: int,
    blog_service: BlogService = Depends(get_blog_service),
):
    """
    Get a blog with its author's public profile.

    Raises:
        404: If the blog does not exist
    """
    return await blog_service.get_blog(blog_id)


@router.post("/save/{blog_id}", response_model=SaveToggleResponse)
async def toggle_save(
    blog_id: int,
    current_user: CurrentUser,
    saved_blog_service: SavedBlogService = Depends(get_saved_blog_service),
):
    """
    Save a blog, or unsave it if it is already saved.

    Raises:
        404: If the blog does not exist
    """
    message, saved = await saved_blog_service.toggle_save(current_user["user_id"], blog_id)
    return SaveToggleResponse(message=message, saved=saved)
