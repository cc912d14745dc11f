"""SQLAlchemy ORM models.

Models represent database tables:
- appointments: Bookings submitted from the site
- messages: Contact form submissions
- blog_posts: Editable blog articles
- open_hours: Business hours, one row per day
"""

from site_api.models.appointment import Appointment
from site_api.models.blog_post import BlogPost
from site_api.models.message import Message
from site_api.models.open_hour import OpenHour

__all__ = ["Appointment", "BlogPost", "Message", "OpenHour"]
