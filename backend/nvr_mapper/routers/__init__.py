"""Router exports for the NVR mapper API."""
from . import content_sets, health, mapping

__all__ = ["content_sets", "health", "mapping"]
