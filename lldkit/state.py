"""State pattern: a vending machine whose behaviour depends on its state."""

from __future__ import annotations


class VendingMachineError(Exception):
    """Raised when an action is not allowed in the machine's current state."""


class State:
    """A vending machine state; every action is refused unless overridden."""

    def __init__(self, machine: VendingMachine) -> None:
        self.machine = machine

    def add_item(self, count: int) -> None:
        raise VendingMachineError("not allowed")

    def request_item(self) -> None:
        raise VendingMachineError("not allowed")

    def insert_money(self, money: int) -> None:
        raise VendingMachineError("not allowed")

    def dispense_item(self) -> None:
        raise VendingMachineError("not allowed")


class NoItemState(State):
    """The machine is empty; items can only be added."""

    def add_item(self, count: int) -> None:
        print(f"Adding {count} items")
        self.machine.item_count += count
        self.machine.state = HasItemState(self.machine)


class HasItemState(State):
    """Items are in stock; more can be added or one requested."""

    def add_item(self, count: int) -> None:
        print(f"Adding {count} more items")
        self.machine.item_count += count

    def request_item(self) -> None:
        print("Item Requested")
        self.machine.state = ItemRequestedState(self.machine)


class ItemRequestedState(State):
    """An item was requested; the machine waits for money."""

    def insert_money(self, money: int) -> None:
        if self.machine.item_price < money:
            raise VendingMachineError(
                f"inserted money is less, please insert {self.machine.item_price}"
            )
        print("Money entered is ok")
        self.machine.state = HasMoneyState(self.machine)


class HasMoneyState(State):
    """Money was accepted; the item can be dispensed."""

    def dispense_item(self) -> None:
        print("Dispensing Item")
        self.machine.item_count -= 1
        if self.machine.item_count == 0:
            self.machine.state = NoItemState(self.machine)
        else:
            self.machine.state = HasItemState(self.machine)


class VendingMachine:
    """Delegates every action to its current state."""

    def __init__(self, item_count: int, item_price: int) -> None:
        self.item_count = item_count
        self.item_price = item_price
        self.state: State = (
            NoItemState(self) if item_count == 0 else HasItemState(self)
        )

    def add_item(self, count: int) -> None:
        self.state.add_item(count)

    def request_item(self) -> None:
        self.state.request_item()

    def insert_money(self, money: int) -> None:
        self.state.insert_money(money)

    def dispense_item(self) -> None:
        self.state.dispense_item()