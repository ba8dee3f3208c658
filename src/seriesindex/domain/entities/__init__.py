"""Domain entities."""

from dataclasses import dataclass, field


# Hey future me, SeriesRecord is THE entity of this package - one row in the series table!
# id is None until the store assigns one on insert, after that it never changes. clean_title,
# title_slug and tvdb_id are NOT unique - remakes share clean titles ("Battlestar Galactica"
# 1978 vs 2004) and bad imports can duplicate slugs or TVDB ids. Lookups deal with that at
# query time, nobody prevents it at write time. tags=None means "no tags column value", which
# is NOT the same as tags=[] (explicitly empty) - all_series_tags() relies on that difference!
@dataclass
class SeriesRecord:
    """A media series in the catalog."""

    title: str
    path: str
    year: int
    tvdb_id: int
    clean_title: str = ""
    title_slug: str = ""
    tags: list[int] | None = field(default=None)
    id: int | None = None

    def __str__(self) -> str:
        return f"[{self.id}] {self.title}"


__all__ = ["SeriesRecord"]
