from blog_service.utils.helpers import DATE_FORMAT, format_timestamp, host, today_str, utc_now
from blog_service.utils.ids import is_object_id, new_object_id

__all__ = [
    "DATE_FORMAT",
    "format_timestamp",
    "host",
    "is_object_id",
    "new_object_id",
    "today_str",
    "utc_now",
]
