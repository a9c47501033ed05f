class SecretSharingError(ValueError):
    """Base class for every input error raised by the sharing engine."""


class InvalidSecretLength(SecretSharingError):
    pass


class ThresholdTooLow(SecretSharingError):
    pass


class InsufficientShares(SecretSharingError):
    pass


class TooManyShares(SecretSharingError):
    pass


class DuplicateShareIndex(SecretSharingError):
    pass


class InvalidShare(SecretSharingError):
    pass
