"""Blog post model.

The only entity that can be edited and deleted after creation. ``image`` holds
a URL, usually one returned by the upload endpoint.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from site_api.stores.database import Base, new_record_id, utcnow


class BlogPost(Base):
    """Blog article shown on the site."""

    __tablename__ = "blog_posts"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_record_id)

    title: Mapped[str | None] = mapped_column(String(300))
    date: Mapped[str | None] = mapped_column(String(50))  # display date, free-form
    image: Mapped[str | None] = mapped_column(Text)
    content: Mapped[str | None] = mapped_column(Text)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, index=True)

    def __repr__(self) -> str:
        return f"<BlogPost {self.id} {self.title!r}>"
