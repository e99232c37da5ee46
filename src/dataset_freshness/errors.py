class FreshnessError(Exception):
    """Base class for every fatal condition of a freshness check."""


class UsageError(FreshnessError):
    pass


class ConfigError(FreshnessError):
    pass


class RetrievalError(FreshnessError):
    pass


class SchemaError(FreshnessError):
    pass


class DeliveryError(FreshnessError):
    pass
