from .client import UpstreamClient, UpstreamError

__all__ = ["UpstreamClient", "UpstreamError"]
