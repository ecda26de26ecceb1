"""Summary: Resource feature exports.
Why: Give conversion code one import path for sanitizing and collecting assets.
"""

from .domain.sanitizer import Sanitizer
from .usecases.resource_resolver import ResolvedResources, ResourceSet, resolve_resources

__all__ = ["ResolvedResources", "ResourceSet", "Sanitizer", "resolve_resources"]
