DEFAULT_DAILY_SWIPE_LIMIT = 10
DEFAULT_REFERENCE_TIMEZONE = "Asia/Jakarta"
DUPLICATE_SWIPE_MESSAGE = "You have already swiped on this user"
SELF_SWIPE_MESSAGE = "You cannot swipe on yourself"
QUOTA_EXCEEDED_MESSAGE = "Daily swipe limit reached, upgrade to premium for unlimited swipes"
