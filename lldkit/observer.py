"""Observer pattern: customers are told when an item is back in stock."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass


class Observer(ABC):
    """Something that wants to hear about item updates."""

    @abstractmethod
    def update(self, item_name: str) -> None:
        """React to news about an item."""


@dataclass(eq=False)
class Customer(Observer):
    """A customer identified by an e-mail address."""

    customer_id: str

    def update(self, item_name: str) -> None:
        print(
            f"Sending email to customer {json.dumps(self.customer_id)} "
            f"for item {json.dumps(item_name)}"
        )


class Item:
    """An item whose subscribers are notified when it is in stock."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.in_stock = False
        self.subscribers: list[Observer] = []

    def subscribe(self, observer: Observer) -> None:
        self.subscribers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        self.subscribers = [s for s in self.subscribers if s is not observer]

    def notify_all(self) -> None:
        for subscriber in self.subscribers:
            subscriber.update(self.name)

    def update_availability(self) -> None:
        print(f"Item {self.name} is now in stock")
        self.in_stock = True
        self.notify_all()