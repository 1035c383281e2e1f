from .matcher import HIGH_PRECISION, MEDIUM_PRECISION, ExactMatcher
