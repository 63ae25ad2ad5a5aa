from dating_app.economy.subscriptions import SubscriptionService

__all__ = ["SubscriptionService"]
