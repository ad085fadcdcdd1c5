from .attributes import parse_git_attributes
from .zones import Zones, extract_preserved_zone, has_marker, split_zones

__all__ = [
    "Zones",
    "extract_preserved_zone",
    "has_marker",
    "parse_git_attributes",
    "split_zones",
]
