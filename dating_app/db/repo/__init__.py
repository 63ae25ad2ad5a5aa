from dating_app.db.repo.daily_limits_repo import DailyLimitsRepo
from dating_app.db.repo.premium_packages_repo import PremiumPackagesRepo
from dating_app.db.repo.subscriptions_repo import SubscriptionsRepo
from dating_app.db.repo.swipes_repo import SwipesRepo
from dating_app.db.repo.users_repo import UsersRepo

__all__ = [
    "DailyLimitsRepo",
    "PremiumPackagesRepo",
    "SubscriptionsRepo",
    "SwipesRepo",
    "UsersRepo",
]
