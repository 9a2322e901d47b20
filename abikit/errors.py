"""Exceptions raised while handling contract ABI data."""


class AbiError(Exception):
    """Base class for every error raised by this package."""


class InvalidNameError(AbiError):
    """An entity, such as a function, event or type name, is not valid."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid name: {name}")
        self.name = name


class InvalidDataError(AbiError):
    """Data does not match what the ABI specification describes."""

    def __init__(self) -> None:
        super().__init__("Invalid data")


class SerializationError(AbiError):
    """A JSON ABI description could not be read."""

    def __init__(self, detail: object) -> None:
        super().__init__(f"Serialization error: {detail}")
        self.detail = detail