"""Data stores for persistence.

Stores handle:
- SQL database: engine lifecycle, sessions, per-entity repositories
- Upload directory: writing files under unique names

No request handling in stores - that belongs in routes.
"""

from site_api.stores.database import Base, RecordStore
from site_api.stores.uploads import UploadStorage

__all__ = ["Base", "RecordStore", "UploadStorage"]
