"""Marketing module."""

from .handler import MarketingHandler

__all__ = ["MarketingHandler"]
