"""Errors raised while validating the game configuration."""


class ConfigurationError(Exception):
    """Base class for invalid render or gameplay configuration values."""

    default_message = "Invalid configuration value.\n"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)

    @property
    def message(self) -> str:
        return str(self.args[0])


class NullNegativeDimensionsError(ConfigurationError):
    """A render dimension was zero or negative."""

    default_message = (
        "Negative/null render dimensions... "
        "Returning to render dimensions configuration prompt.\n"
    )


class NonLandscapeDimensionsError(ConfigurationError):
    """The render width was not strictly larger than the height."""

    default_message = (
        "Non-landscape render dimensions... "
        "Returning to render dimensions configuration prompt.\n"
    )


class InvalidMultiplierError(ConfigurationError):
    """The game multiplier was outside the accepted range."""

    default_message = (
        "Invalid game multiplier value... "
        "Returning to game multiplier configuration prompt\n"
    )