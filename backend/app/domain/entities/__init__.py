from .article import Article, to_utc

__all__ = [
    "Article",
    "to_utc",
]
