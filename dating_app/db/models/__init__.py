from dating_app.db.models.daily_limits import DailyLimit
from dating_app.db.models.premium_packages import PremiumPackage
from dating_app.db.models.swipes import Swipe
from dating_app.db.models.user_premium_subscriptions import UserPremiumSubscription
from dating_app.db.models.users import User

__all__ = [
    "DailyLimit",
    "PremiumPackage",
    "Swipe",
    "User",
    "UserPremiumSubscription",
]
