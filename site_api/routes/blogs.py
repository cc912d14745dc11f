"""Blog endpoints.

POST   /api/blogs       - create a post (all fields required)
GET    /api/blogs       - list posts, newest first (title/date/image/content only)
GET    /api/blogs/{id}  - single post, 404 if absent
PUT    /api/blogs/{id}  - merge supplied fields; null if absent
DELETE /api/blogs/{id}  - delete; succeeds even if nothing matched
"""

import logging

from fastapi import APIRouter, Depends, status

from site_api.errors import NotFoundError
from site_api.routes.deps import get_store
from site_api.schemas import BlogCreate, BlogCreated, BlogRead, BlogSummary, BlogUpdate, MessageResponse
from site_api.services.validation import BLOG_REQUIRED, require_fields
from site_api.stores import RecordStore

router = APIRouter()
logger = logging.getLogger("uvicorn.error")


@router.post("", response_model=BlogCreated, status_code=status.HTTP_201_CREATED)
async def create_blog(
    payload: BlogCreate,
    store: RecordStore = Depends(get_store),
) -> BlogCreated:
    fields = payload.model_dump()
    require_fields(fields, BLOG_REQUIRED)

    blog = await store.blogs.insert(fields)
    logger.info(f"Blog created id={blog.id} title={blog.title!r}")

    return BlogCreated(message="Blog created successfully", blog=BlogRead.model_validate(blog))


@router.get("/{blog_id}", response_model=BlogRead)
async def get_blog(blog_id: str, store: RecordStore = Depends(get_store)) -> BlogRead:
    """Get a single blog post.

    Raises:
        NotFoundError: If no post has this id.
    """
    blog = await store.blogs.find_by_id(blog_id)
    if blog is None:
        raise NotFoundError("Blog not found", code="BLOG_NOT_FOUND", detail={"blog_id": blog_id})
    return BlogRead.model_validate(blog)


@router.get("", response_model=list[BlogSummary])
async def list_blogs(store: RecordStore = Depends(get_store)) -> list[BlogSummary]:
    blogs = await store.blogs.find_all(sort="newest")
    return [BlogSummary.model_validate(b) for b in blogs]


@router.put("/{blog_id}", response_model=BlogRead | None)
async def update_blog(
    blog_id: str,
    payload: BlogUpdate,
    store: RecordStore = Depends(get_store),
) -> BlogRead | None:
    """Merge the supplied fields into a post.

    No required-field check on update: any subset of fields may be sent.
    Responds with null when the id does not exist.
    """
    fields = payload.model_dump(exclude_unset=True)
    blog = await store.blogs.update_by_id(blog_id, fields)
    if blog is None:
        return None

    logger.info(f"Blog updated id={blog_id} fields={sorted(fields)}")
    return BlogRead.model_validate(blog)


@router.delete("/{blog_id}", response_model=MessageResponse)
async def delete_blog(blog_id: str, store: RecordStore = Depends(get_store)) -> MessageResponse:
    deleted = await store.blogs.delete_by_id(blog_id)
    if deleted:
        logger.info(f"Blog deleted id={blog_id}")
    return MessageResponse(message="Blog deleted successfully")
