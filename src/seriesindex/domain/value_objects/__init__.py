"""Domain value objects."""

from .lookup_result import LookupResult, LookupStatus
from .title_normalization import clean_title, title_slug

__all__ = ["LookupResult", "LookupStatus", "clean_title", "title_slug"]
