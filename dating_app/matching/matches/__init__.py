from dating_app.matching.matches.service import MatchService

__all__ = ["MatchService"]
