"""Business hours for a single day.

``day`` is unique: writes go through an upsert keyed on it. ``open`` and
``close`` are free-form strings ("09:00", "Closed", ...).
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from site_api.stores.database import Base, new_record_id


class OpenHour(Base):
    __tablename__ = "open_hours"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_record_id)

    day: Mapped[str | None] = mapped_column(String(50), unique=True, index=True)
    open: Mapped[str | None] = mapped_column(String(50))
    close: Mapped[str | None] = mapped_column(String(50))

    def __repr__(self) -> str:
        return f"<OpenHour {self.day} {self.open}-{self.close}>"
