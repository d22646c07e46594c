from __future__ import annotations

from functools import total_ordering
from typing import ClassVar, Sequence

from compositeid.codec.composite import CompositeLayout
from compositeid.errors import NegativeDuration
from compositeid.seats.constants import (
    CUSTOMER_ID_BITS,
    FLIGHT_ID_BITS,
    FLIGHTS_DAYS_PAST,
    MILLISECONDS_PER_DAY,
    MILLISECONDS_PER_HOUR,
)
from compositeid.utils.logger import get_logger
from compositeid.utils.timestamps import Instant, add_milliseconds, milliseconds_between

logger = get_logger("seats.encoding")


@total_ordering
class CompositeId:
    """
    base class for identifiers packed into a single 64-bit integer.

    subclasses declare COMPOSITE_BITS (and optionally COMPOSITE_NAMES); the
    layout and its scale table are computed once, when the subclass is defined.
    """

    COMPOSITE_BITS: ClassVar[tuple[int, ...]] = ()
    COMPOSITE_NAMES: ClassVar[tuple[str, ...] | None] = None
    LAYOUT: ClassVar[CompositeLayout]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if cls.COMPOSITE_BITS:
            cls.LAYOUT = CompositeLayout(cls.COMPOSITE_BITS, cls.COMPOSITE_NAMES)
            logger.debug(f"registered composite layout for {cls.__name__}: {cls.LAYOUT}")

    def to_array(self) -> list[int]:
        raise NotImplementedError

    def _assign(self, values: Sequence[int]) -> None:
        raise NotImplementedError

    @classmethod
    def from_composite(cls, composite_id: int):
        obj = cls()
        obj.decode(composite_id)
        return obj

    def encode(self, checked: bool = False) -> int:
        if checked:
            return self.LAYOUT.encode_checked(self.to_array())
        return self.LAYOUT.encode(self.to_array())

    def decode(self, composite_id: int) -> None:
        # all fields are decoded before any is assigned
        self._assign(self.LAYOUT.decode(composite_id))

    def set(self, composite_id: int) -> None:
        self.decode(composite_id)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, CompositeId) or type(other) is not type(self):
            return False
        return self.to_array() == other.to_array()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CompositeId) or type(other) is not type(self):
            return NotImplemented
        return self.to_array() < other.to_array()

    def __hash__(self) -> int:
        return hash((type(self).__name__, *self.to_array()))


class FlightId(CompositeId):
    COMPOSITE_BITS = FLIGHT_ID_BITS
    COMPOSITE_NAMES = ("airline_id", "depart_airport_id", "arrive_airport_id", "depart_date")

    def __init__(
        self,
        airline_id: int = 0,
        depart_airport_id: int = 0,
        arrive_airport_id: int = 0,
        depart_date: int = 0,
    ) -> None:
        self.airline_id = int(airline_id)
        self.depart_airport_id = int(depart_airport_id)
        self.arrive_airport_id = int(arrive_airport_id)
        # hours (not days) since the benchmark start
        self.depart_date = int(depart_date)
        if self.depart_date < 0:
            raise ValueError(f"depart_date must be >= 0, got {self.depart_date}")

    @classmethod
    def for_departure(
        cls,
        airline_id: int,
        depart_airport_id: int,
        arrive_airport_id: int,
        benchmark_start: Instant,
        flight_date: Instant,
    ) -> FlightId:
        depart_date = cls.calculate_flight_date(benchmark_start, flight_date)
        return cls(airline_id, depart_airport_id, arrive_airport_id, depart_date)

    @staticmethod
    def calculate_flight_date(benchmark_start: Instant, flight_date: Instant) -> int:
        """
        returns the whole hours between the benchmark start and the departure.

        a departure before the benchmark start raises NegativeDuration.
        """
        delta_ms = milliseconds_between(benchmark_start, flight_date)
        if delta_ms < 0:
            logger.debug(f"negative flight date: {benchmark_start} / {flight_date}")
            raise NegativeDuration(benchmark_start, flight_date)
        return delta_ms // MILLISECONDS_PER_HOUR

    def to_array(self) -> list[int]:
        return [self.airline_id, self.depart_airport_id, self.arrive_airport_id, self.depart_date]

    def _assign(self, values: Sequence[int]) -> None:
        self.airline_id, self.depart_airport_id, self.arrive_airport_id, self.depart_date = values

    def departure_timestamp(self, benchmark_start: Instant) -> Instant:
        return add_milliseconds(benchmark_start, self.depart_date * MILLISECONDS_PER_HOUR)

    def is_upcoming(self, benchmark_start: Instant, past_days: int = FLIGHTS_DAYS_PAST) -> bool:
        depart = self.departure_timestamp(benchmark_start)
        return milliseconds_between(benchmark_start, depart) >= past_days * MILLISECONDS_PER_DAY

    def __repr__(self) -> str:
        return (
            "FlightId("
            f"airline_id={self.airline_id}, depart_airport_id={self.depart_airport_id}, "
            f"arrive_airport_id={self.arrive_airport_id}, depart_date={self.depart_date}"
            ")"
        )


class CustomerId(CompositeId):
    COMPOSITE_BITS = CUSTOMER_ID_BITS
    COMPOSITE_NAMES = ("id", "depart_airport_id")

    def __init__(self, id: int = 0, depart_airport_id: int = 0) -> None:
        self.id = int(id)
        self.depart_airport_id = int(depart_airport_id)

    def to_array(self) -> list[int]:
        return [self.id, self.depart_airport_id]

    def _assign(self, values: Sequence[int]) -> None:
        self.id, self.depart_airport_id = values

    def __repr__(self) -> str:
        return f"CustomerId(id={self.id}, depart_airport_id={self.depart_airport_id})"
