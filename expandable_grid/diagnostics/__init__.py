from .growth_tracker import GROWTH_KINDS, GrowthEvent, GrowthTracker

__all__ = [
    "GROWTH_KINDS",
    "GrowthEvent",
    "GrowthTracker",
]
