"""Parking fees: minute-wise, fixed hourly and dynamic hourly pricing."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from enum import IntEnum

MINUTE_PRICE = 1
FIXED_HOURLY_PRICE = 40
FIRST_HOUR_PRICE = 50
SUBSEQUENT_HOUR_PRICE = 50


class PricingStrategyType(IntEnum):
    MINUTE_WISE = 1
    FIXED_HOURLY = 2
    DYNAMIC_HOURLY = 3


def _elapsed(entry_time: datetime, now: datetime | None) -> timedelta:
    if now is None:
        now = datetime.now(entry_time.tzinfo)
    return now - entry_time


def _whole_units(elapsed: timedelta, unit: timedelta) -> int:
    return math.ceil(elapsed / unit)


class PricingStrategy(ABC):
    """Works out what a stay costs from its entry time."""

    @abstractmethod
    def calculate_price(self, entry_time: datetime, now: datetime | None = None) -> int:
        """Return the price of a stay from entry_time until now (default: the current time)."""


class MinuteWisePricingStrategy(PricingStrategy):
    """Charges for every started minute."""

    def __init__(self, minute_price: int = MINUTE_PRICE) -> None:
        self.minute_price = minute_price

    def calculate_price(self, entry_time: datetime, now: datetime | None = None) -> int:
        minutes = _whole_units(_elapsed(entry_time, now), timedelta(minutes=1))
        return minutes * self.minute_price


class FixedHourlyPricingStrategy(PricingStrategy):
    """Charges the same for every started hour."""

    def __init__(self, hourly_price: int = FIXED_HOURLY_PRICE) -> None:
        self.hourly_price = hourly_price

    def calculate_price(self, entry_time: datetime, now: datetime | None = None) -> int:
        hours = _whole_units(_elapsed(entry_time, now), timedelta(hours=1))
        return hours * self.hourly_price


class DynamicHourlyPricingStrategy(PricingStrategy):
    """Charges one price for the first hour and another for each hour after."""

    def __init__(
        self,
        first_hour_price: int = FIRST_HOUR_PRICE,
        subsequent_hour_price: int = SUBSEQUENT_HOUR_PRICE,
    ) -> None:
        self.first_hour_price = first_hour_price
        self.subsequent_hour_price = subsequent_hour_price

    def calculate_price(self, entry_time: datetime, now: datetime | None = None) -> int:
        hours = _whole_units(_elapsed(entry_time, now), timedelta(hours=1))
        return self.first_hour_price + self.subsequent_hour_price * (hours - 1)


_STRATEGIES: dict[PricingStrategyType, type[PricingStrategy]] = {
    PricingStrategyType.MINUTE_WISE: MinuteWisePricingStrategy,
    PricingStrategyType.FIXED_HOURLY: FixedHourlyPricingStrategy,
    PricingStrategyType.DYNAMIC_HOURLY: DynamicHourlyPricingStrategy,
}


def new_pricing_strategy(strategy_type: PricingStrategyType | int) -> PricingStrategy:
    """Create the pricing strategy of the given type."""
    try:
        kind = PricingStrategyType(strategy_type)
    except ValueError:
        raise ValueError("invalid pricing strategy type") from None
    return _STRATEGIES[kind]()