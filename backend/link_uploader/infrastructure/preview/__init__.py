from .http_preview_fetcher import HttpPreviewFetcher, parse_preview

__all__ = ["HttpPreviewFetcher", "parse_preview"]
