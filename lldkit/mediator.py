"""Mediator pattern: a station manager coordinates trains at one platform."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque


class Mediator(ABC):
    """Decides whether trains may arrive and reacts to departures."""

    @abstractmethod
    def can_arrive(self, train: Train) -> bool:
        """Return True if the train may take the platform now."""

    @abstractmethod
    def notify_about_departure(self) -> None:
        """Record that the platform has been freed."""


class Train(ABC):
    """A train that talks to other trains only through its mediator."""

    label = "Train"

    def __init__(self, mediator: Mediator) -> None:
        self.mediator = mediator

    def arrive(self) -> bool:
        """Try to arrive; return True if the train arrived."""
        if not self.mediator.can_arrive(self):
            print(f"{self.label}: Arrival Blocked, Waiting...")
            return False
        print(f"{self.label}: Arrived.")
        return True

    def depart(self) -> None:
        print(f"{self.label}: Leaving...")
        self.mediator.notify_about_departure()

    def permit_arrival(self) -> None:
        print(f"{self.label}: Arrival permitted, ariving")
        self.arrive()


class PassengerTrain(Train):
    label = "PassengerTrain"


class FreightTrain(Train):
    label = "FreightTrain"


class StationManager(Mediator):
    """Keeps one platform and a queue of waiting trains."""

    def __init__(self) -> None:
        self.is_platform_free = True
        self.train_queue: deque[Train] = deque()

    def can_arrive(self, train: Train) -> bool:
        if self.is_platform_free:
            self.is_platform_free = False
            return True
        self.train_queue.append(train)
        return False

    def notify_about_departure(self) -> None:
        self.is_platform_free = True
        if self.train_queue:
            self.train_queue.popleft().permit_arrival()