from .content_api import ContentApiClient

__all__ = ["ContentApiClient"]
