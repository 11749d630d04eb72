from __future__ import annotations
import dataclasses
import typing

from doikernel import exceptions as kernel_exceptions


@dataclasses.dataclass(frozen=True)
class Single:
    value: str | None


@dataclasses.dataclass(frozen=True)
class ClosedRange:
    start: str
    end: str

    def __post_init__(self):
        if not (self.start and self.end):
            raise kernel_exceptions.InvalidDateShape(f'closed range needs both start and end: {self!r}')


@dataclasses.dataclass(frozen=True)
class OpenEndedRange:
    start: str | None = None
    end: str | None = None

    def __post_init__(self):
        if bool(self.start) == bool(self.end):
            raise kernel_exceptions.InvalidDateShape(f'open-ended range needs exactly one of start or end: {self!r}')

    @property
    def present_bound(self) -> str:
        return typing.cast(str, self.start or self.end)


type DateShape = Single | ClosedRange | OpenEndedRange


def date_shape_from_fields(
    date_value: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
) -> DateShape:
    '''collapse the stored (date_value, start_date, end_date) triple into one shape

    >>> date_shape_from_fields('2024-01-01')
    Single(value='2024-01-01')
    >>> date_shape_from_fields(start_date='2020', end_date='2021')
    ClosedRange(start='2020', end='2021')
    >>> date_shape_from_fields(start_date='2020')
    OpenEndedRange(start='2020', end=None)
    >>> date_shape_from_fields(None, '', '2021')
    OpenEndedRange(start=None, end='2021')
    >>> date_shape_from_fields()
    Single(value=None)

    a single value stored alongside its own start date is still a single date
    >>> date_shape_from_fields('2020', start_date='2020')
    Single(value='2020')
    '''
    _value = date_value or None
    _start = start_date or None
    _end = end_date or None
    if _value is not None and (_start is not None or _end is not None):
        if _end is None and _start == _value:
            return Single(_value)
        raise kernel_exceptions.InvalidDateShape(
            f'ambiguous date: value={date_value!r} with start={start_date!r}, end={end_date!r}'
        )
    if _start is not None and _end is not None:
        return ClosedRange(_start, _end)
    if _start is not None or _end is not None:
        return OpenEndedRange(start=_start, end=_end)
    return Single(_value)


@dataclasses.dataclass(frozen=True)
class ResourceDate:
    date_type: str
    shape: DateShape
    date_information: str | None = None

    @classmethod
    def from_fields(
        cls,
        date_type: str,
        *,
        date_value: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        date_information: str | None = None,
    ) -> typing.Self:
        return cls(
            date_type=date_type,
            shape=date_shape_from_fields(date_value, start_date, end_date),
            date_information=date_information,
        )
