class SwipeError(Exception):
    pass


class SelfSwipeError(SwipeError):
    pass


class DuplicateSwipeError(SwipeError):
    pass


class SwipeQuotaExceededError(SwipeError):
    pass


class SwipeUserNotFoundError(SwipeError):
    pass


class SwipeTargetNotFoundError(SwipeUserNotFoundError):
    pass
