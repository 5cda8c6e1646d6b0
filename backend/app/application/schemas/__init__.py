from .article import ArticleCreate, ArticleUpdate, ArticlePatch, ArticleResponse
from .envelope import SuccessEnvelope, ErrorEnvelope

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticlePatch",
    "ArticleResponse",
    "SuccessEnvelope",
    "ErrorEnvelope",
]
