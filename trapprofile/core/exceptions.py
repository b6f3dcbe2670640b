class ConfigurationError(Exception):
    pass


class InvalidLimitsError(ConfigurationError):
    """
    Raised when kinematic limits violate their sign or range constraints.
    """
    pass


class DistanceError(Exception):
    pass


class OutOfRangeQueryError(Exception):
    pass


class EmptyProfileError(OutOfRangeQueryError):
    """
    Raised when a profile is queried before any profile has been generated.
    """
    def __init__(self, *args):
        if not args:
            args = ("No motion profile has been generated yet.",)
        super().__init__(*args)
