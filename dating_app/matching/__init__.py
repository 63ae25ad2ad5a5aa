from dating_app.matching.matches import MatchService
from dating_app.matching.swipes import SwipeService

__all__ = [
    "MatchService",
    "SwipeService",
]
