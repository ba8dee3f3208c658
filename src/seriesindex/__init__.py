"""SeriesIndex - lookup and indexing layer for a media-series catalog."""

__version__ = "0.1.0"
