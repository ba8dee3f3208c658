"""SQLAlchemy ORM models for SeriesIndex."""

from sqlalchemy import JSON, Index, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


# Listen up, SeriesModel is the only table! None of clean_title/title_slug/tvdb_id/path are
# unique - remakes share clean titles and broken imports can duplicate the rest.
# The lookup layer reports those duplicates instead of the DB refusing them.
# Hey future me - tags uses JSON(none_as_null=True)! Without it SQLAlchemy stores Python None
# as the JSON text 'null' and "tags IS NOT NULL" matches every row. We need SQL NULL for
# "no tags" and '[]' for "explicitly empty" - all_series_tags() depends on the difference.
class SeriesModel(Base):
    """SQLAlchemy model for SeriesRecord entity."""

    __tablename__ = "series"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(512), nullable=False)
    clean_title: Mapped[str] = mapped_column(String(512), nullable=False, index=True)
    title_slug: Mapped[str] = mapped_column(String(512), nullable=False, index=True)
    tvdb_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    year: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    path: Mapped[str] = mapped_column(String(1024), nullable=False, index=True)
    tags: Mapped[list[int] | None] = mapped_column(
        JSON(none_as_null=True), nullable=True
    )

    __table_args__ = (Index("ix_series_clean_title_year", "clean_title", "year"),)

    def __repr__(self) -> str:
        return f"<SeriesModel(id={self.id}, clean_title={self.clean_title!r})>"
