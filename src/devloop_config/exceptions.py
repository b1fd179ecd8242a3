"""Exceptions for devloop-config."""


class ConfigError(Exception):
    """Base exception for devloop-config errors."""

    pass


class ConfigFileError(ConfigError):
    """Error reading or writing configuration file."""

    pass


class ConfigValidationError(ConfigError):
    """Error validating configuration data."""

    pass


class UnknownKeyError(ConfigValidationError):
    """Configuration key does not name a known setting."""

    def __init__(self, key: str):
        super().__init__(f"unknown config key '{key}'")
        self.key = key


class PathNotFoundError(ConfigError, FileNotFoundError):
    """Referenced path does not exist."""

    pass


class DirectoryNotFileError(ConfigError, IsADirectoryError):
    """Path names a directory where a file was expected."""

    pass


class SerializationError(ConfigError):
    """Value could not be serialized to JSON."""

    pass


class DeserializationError(ConfigError):
    """Serialized data could not populate the destination type."""

    pass
