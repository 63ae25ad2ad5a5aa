from dating_app.matching.swipes.service import SwipeService

__all__ = ["SwipeService"]
