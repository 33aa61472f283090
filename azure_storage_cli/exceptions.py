class StorageCliError(Exception):
    """Base class for errors reported by the azure-storage command."""


class ConfigParseError(StorageCliError):
    """Exception raised when the JSON config file cannot be parsed."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse config file '{path}': {reason}")


class MissingParameterError(StorageCliError):
    """Exception raised when a parameter required by a command is not set."""

    def __init__(self, field, command):
        self.field = field
        self.command = command
        super().__init__(f"No {field} specified (required by '{command}')")


class LocalFileNotFoundError(StorageCliError):
    """Exception raised when a local source file cannot be read."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Local file '{path}' not found.")


class ContainerNotFoundError(StorageCliError):
    """Exception raised when a container is not found."""

    def __init__(self, container):
        self.container = container
        super().__init__(f"Container '{container}' not found.")


class BlobNotFoundError(StorageCliError):
    """Exception raised when a blob is not found."""

    def __init__(self, container, blob):
        self.container = container
        self.blob = blob
        super().__init__(f"Blob '{blob}' not found in container '{container}'.")


class BlobTypeMismatchError(StorageCliError):
    """Exception raised when a blob exists with a type the operation cannot use."""

    def __init__(self, container, blob, reason):
        self.container = container
        self.blob = blob
        self.reason = reason
        super().__init__(f"Blob '{container}/{blob}' has an incompatible type: {reason}")


class BlobExistsError(StorageCliError):
    """Exception raised when creating a blob that already exists."""

    def __init__(self, container, blob, reason):
        self.container = container
        self.blob = blob
        self.reason = reason
        super().__init__(f"Blob '{container}/{blob}' already exists: {reason}")


class StorageOperationError(StorageCliError):
    """Exception raised when the storage service or network reports a failure."""

    def __init__(self, operation, reason):
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation} failed: {reason}")
