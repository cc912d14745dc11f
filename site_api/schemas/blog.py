"""Schemas for blog endpoints (/api/blogs)."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from site_api.schemas.common import FormText, UtcDatetime


class BlogCreate(BaseModel):
    """Request body for a new blog post."""

    title: FormText = None
    date: FormText = None
    image: FormText = None
    content: FormText = None


class BlogUpdate(BaseModel):
    """Partial update; only fields present in the body are applied.

    Unknown keys are ignored.
    """

    title: FormText = None
    date: FormText = None
    image: FormText = None
    content: FormText = None


class BlogSummary(BaseModel):
    """Listing projection: no creation timestamp."""

    id: str = Field(validation_alias=AliasChoices("_id", "id"), serialization_alias="_id")
    title: str | None = None
    date: str | None = None
    image: str | None = None
    content: str | None = None

    model_config = ConfigDict(from_attributes=True)


class BlogRead(BlogSummary):
    """Full blog post."""

    created_at: UtcDatetime = Field(
        validation_alias=AliasChoices("createdAt", "created_at"),
        serialization_alias="createdAt",
    )


class BlogCreated(BaseModel):
    message: str
    blog: BlogRead
