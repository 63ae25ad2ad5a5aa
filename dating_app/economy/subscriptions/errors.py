class SubscriptionError(Exception):
    pass


class AlreadySubscribedError(SubscriptionError):
    pass


class SubscriptionNotFoundError(SubscriptionError):
    pass


class PremiumPackageNotFoundError(SubscriptionError):
    pass


class SubscriptionUserNotFoundError(SubscriptionError):
    pass
