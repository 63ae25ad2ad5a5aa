from dating_app.economy.subscriptions.service import SubscriptionService

__all__ = ["SubscriptionService"]
