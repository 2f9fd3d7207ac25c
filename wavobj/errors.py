from __future__ import annotations


class DecodeError(ValueError):
    """A single statement could not be decoded."""


class ArityError(DecodeError):
    def __init__(self, message: str, *, expected: int | str, actual: int) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NumericFormatError(DecodeError):
    def __init__(self, token: str, *, kind: str = "float") -> None:
        super().__init__(f"Invalid {kind} value: {token!r}")
        self.token = token
        self.kind = kind


class UnknownTypeError(DecodeError):
    def __init__(self, message: str, *, value: str) -> None:
        super().__init__(message)
        self.value = value


class ObjParseError(ValueError):
    """
    Raised by the loader when a statement fails to decode. Carries the 1-based
    line number, the stripped source line and the underlying ``DecodeError``.
    """

    def __init__(self, line_number: int, line: str, cause: DecodeError) -> None:
        super().__init__(f"line {line_number}: {cause} ({line!r})")
        self.line_number = line_number
        self.line = line
        self.cause = cause
