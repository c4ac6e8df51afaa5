from typing import Any, Container, Type, TypeVar, Union

from typing_extensions import Protocol

T = TypeVar("T", bound="Comparable")


class Comparable(Protocol):
    def __lt__(self: T, other: T) -> bool:
        pass  # pragma: no cover

    def __le__(self: T, other: T) -> bool:
        pass  # pragma: no cover

    def __gt__(self: T, other: T) -> bool:
        pass  # pragma: no cover

    def __ge__(self: T, other: T) -> bool:
        pass  # pragma: no cover


class TarError(Exception):
    """Base error for all errors in the library."""


class TarParseError(TarError):
    """An error when decoding archive data."""


class TarUnexpectedEOFError(TarParseError):
    """The buffer ends before a header or the declared entry data."""


class TarInvalidHeaderError(TarParseError):
    """A malformed end-of-archive marker or numeric field."""


class TarChecksumError(TarParseError):
    """The stored header checksum does not match the computed one."""


class TarNumericValueTooBigError(TarParseError):
    """An octal field does not fit into a platform integer."""


class TarUnsupportedHeaderError(TarParseError):
    """A recognised entry type that cannot be materialized (links, devices, ...)."""


class TarPathError(TarError):
    """An entry path that must not be written."""


class TarUnsafePathError(TarPathError):
    """An empty, NUL-containing or disallowed absolute path."""


class TarPathOutsideRootError(TarPathError):
    """A path that would escape the destination directory."""


class TarShortWriteError(TarError):
    """File content could not be written completely."""


class TarNoMemoryError(TarError):
    """The scratch region for an extraction could not be set up."""


class TarReaderStateError(TarError):
    """The low-level reader was driven out of order."""


def _assert_base(  # pylint: disable=too-many-arguments
    result: bool,
    operator: str,
    name: str,
    expected: Any,
    actual: Any,
    location: Union[int, str],
    error_class: Type[TarError] = TarParseError,
) -> None:
    if not result:
        raise error_class(f"{name}: {actual!r} {operator} {expected!r} (at {location})")


def assert_eq(
    name: str,
    expected: T,
    actual: T,
    location: Union[int, str],
    error_class: Type[TarError] = TarParseError,
) -> None:
    result = actual == expected
    _assert_base(result, "==", name, expected, actual, location, error_class)


def assert_le(
    name: str,
    expected: T,
    actual: T,
    location: Union[int, str],
    error_class: Type[TarError] = TarParseError,
) -> None:
    result = actual <= expected
    _assert_base(result, "<=", name, expected, actual, location, error_class)


def assert_not_in(
    name: str,
    expected: Container[T],
    actual: T,
    location: Union[int, str],
    error_class: Type[TarError] = TarParseError,
) -> None:
    result = actual not in expected
    _assert_base(result, "not in", name, expected, actual, location, error_class)


def assert_all_zero(
    name: str,
    data: Union[bytes, bytearray, memoryview],
    location: int,
    error_class: Type[TarError] = TarParseError,
) -> None:
    for i, byte in enumerate(data):
        assert_eq(f"{name} byte {i:03}", 0, byte, location + i, error_class)
