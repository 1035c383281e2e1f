from .matcher import ProximityMatcher
