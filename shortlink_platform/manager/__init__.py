"""
Core short-link engine: code generation, validation, registry, resolution, access control.
"""

from .about import AboutPage
from .registry import Registry
from .resolver import Resolver
from .shortlink_service import ShortLinkService

__all__ = ["AboutPage", "Registry", "Resolver", "ShortLinkService"]
