"""Base class shared by the domain errors of every app."""

from enum import Enum


class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    def __init__(self, code: Enum, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
