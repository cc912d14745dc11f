"""Appointment model.

A booking request left by a visitor. Append-only: never updated or deleted
through the API.
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from site_api.stores.database import Base, new_record_id, utcnow


class Appointment(Base):
    """Appointment booked for a service on a given date."""

    __tablename__ = "appointments"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_record_id)

    name: Mapped[str | None] = mapped_column(String(200))
    phone: Mapped[str | None] = mapped_column(String(50))
    date: Mapped[str | None] = mapped_column(String(50))  # free-form, e.g. "2024-01-01"
    service: Mapped[str | None] = mapped_column(String(200))  # e.g. "Haircut"

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, index=True)

    def __repr__(self) -> str:
        return f"<Appointment {self.id} {self.service} on {self.date}>"
