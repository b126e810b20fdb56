"""Exception hierarchy for bucket-listing."""


class BucketListingError(Exception):
    """Base exception for all bucket-listing errors."""

    pass


class ValidationError(BucketListingError):
    """Raised when validation fails."""

    pass


class CommandExecutionError(BucketListingError):
    """Raised when a snapshot command or store call fails."""

    pass
