"""Error types raised by the storage class orchestrator."""


class OrchestratorError(Exception):
    """Base class for orchestrator errors."""
    def __init__(self, message, code='InternalError'):
        super().__init__(message)
        self.message = message
        self.code = code


class InvalidStorageClassConfigError(OrchestratorError):
    """Storage class configuration could not be parsed or validated."""
    def __init__(self, message):
        super().__init__(f"Unable to unmarshal config: {message}", "InvalidConfig")


class InvalidAttributeError(OrchestratorError):
    """Attribute value cannot be turned into a request."""
    def __init__(self, name, value, expected):
        super().__init__(
            f"Invalid value {value!r} for attribute {name}: expected {expected}",
            "InvalidAttribute"
        )
        self.name = name
        self.value = value


class InvalidPoolStateError(OrchestratorError):
    """A pool was presented for matching without its capability map."""
    def __init__(self, storage_class, pool, backend, attribute):
        super().__init__(
            f"Storage pool {pool} on backend {backend} has no attributes; "
            f"cannot evaluate attribute {attribute} for storage class {storage_class}",
            "InvalidPoolState"
        )
        self.storage_class = storage_class
        self.pool = pool
        self.backend = backend
        self.attribute = attribute


class NotFoundError(OrchestratorError):
    """Requested object does not exist."""
    def __init__(self, kind, name):
        super().__init__(f"The specified {kind} does not exist: {name}", "NotFound")
        self.kind = kind
        self.name = name


class AlreadyExistsError(OrchestratorError):
    """Object with the same name already exists."""
    def __init__(self, kind, name):
        super().__init__(f"The requested {kind} name is not available: {name}", "AlreadyExists")
        self.kind = kind
        self.name = name
