class BaseError(Exception):
    pass


class ChainNotSupported(BaseError):
    pass


class ConfigurationError(BaseError):
    pass


# -------- Validation error --------

class ValidationError(BaseError, ValueError):
    pass


class InvalidAddress(ValidationError):
    pass


class InvalidDecimals(ValidationError):
    pass


# -------- Ordering error --------

class OrderingError(BaseError):
    pass


class MismatchedChain(OrderingError):
    pass


class IdenticalAddress(OrderingError):
    pass
