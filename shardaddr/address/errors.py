"""Address validation and grinding errors."""

from __future__ import annotations

from typing import Any


class AddressError(ValueError):
    """An argument failed validation.

    Carries the offending argument name and value so callers can report
    exactly what was rejected.
    """

    def __init__(self, reason: str, argument: str, value: Any) -> None:
        self.reason = reason
        self.argument = argument
        self.value = value
        super().__init__(f"{reason} (argument={argument!r}, value={value!r})")


class InvalidAddress(AddressError):
    pass


class BadChecksum(AddressError):
    pass


class BadIcapChecksum(AddressError):
    pass


class MissingFromAddress(AddressError):
    pass


class InvalidSalt(AddressError):
    pass


class InvalidInitCodeHash(AddressError):
    pass


class InvalidNonce(AddressError):
    pass


class InvalidBytecode(AddressError):
    pass


class MissingNonce(AddressError):
    pass


class MissingOrInvalidShard(AddressError):
    pass


class GrindError(Exception):
    pass


class GrindCancelled(GrindError):
    """Raised when a grind is cancelled or runs past its deadline."""

    def __init__(self, iterations: int) -> None:
        self.iterations = iterations
        super().__init__(f"grind cancelled after {iterations} iterations")


class GrindExhausted(GrindError):
    """Raised when a grind reaches its iteration cap without a match."""

    def __init__(self, iterations: int) -> None:
        self.iterations = iterations
        super().__init__(f"no matching address after {iterations} iterations")
