# lldkit

Small, self-contained implementations of the classic creational, structural
and behavioural design patterns, together with a few low-level-design case
studies (tic-tac-toe, snake and ladder, and parking-fee pricing). Each
pattern lives in its own module and can be read, imported and experimented
with on its own. Most classes print what they do, as a demonstration would,
and many also return the result so that it can be checked.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

Behavioural patterns

| Module               | Pattern                  | Example                                      |
|----------------------|--------------------------|----------------------------------------------|
| `lldkit.chain`       | Chain of responsibility  | Hospital `Reception`, `Doctor`, `Medical`, `Cashier` |
| `lldkit.command`     | Command                  | `Editor` with cut, copy, paste and undo      |
| `lldkit.iterator`    | Iterator                 | Walking contacts on `Facebook` and `Linkedin` |
| `lldkit.mediator`    | Mediator                 | `StationManager` coordinating trains         |
| `lldkit.memento`     | Memento                  | Undo/redo for a `BankAccount` and a `DocumentEditor` |
| `lldkit.observer`    | Observer                 | `Customer`s subscribed to an `Item`          |
| `lldkit.state`       | State                    | `VendingMachine`                             |
| `lldkit.strategy`    | Strategy                 | `Cache` with FIFO, LRU and LFU eviction      |
| `lldkit.template`    | Template method          | OTP delivery over `Sms` or `Email`           |
| `lldkit.visitor`     | Visitor                  | Area and circumference of shapes             |

Creational patterns

| Module                    | Pattern          | Example                                   |
|---------------------------|------------------|-------------------------------------------|
| `lldkit.abstract_factory` | Abstract factory | `Adidas` and `Nike` making shirts and shoes |
| `lldkit.builder`          | Builder          | Normal houses and igloos via a `Director` |
| `lldkit.factory_method`   | Factory method   | `DiskStorage` and `MemoryStorage`         |
| `lldkit.prototype`        | Prototype        | Cloning a `Folder` tree                   |
| `lldkit.singleton`        | Singleton        | Thread-safe lazy instance                 |

Structural patterns

| Module              | Pattern    | Example                                     |
|---------------------|------------|---------------------------------------------|
| `lldkit.adapter`    | Adapter    | Lightning connector into a USB machine      |
| `lldkit.bridge`     | Bridge     | Computers and printers                      |
| `lldkit.composite`  | Composite  | Searching files and folders                 |
| `lldkit.decorator`  | Decorator  | Compressing and encoding a file data source |
| `lldkit.facade`     | Facade     | `WalletFacade` over account, code, wallet and ledger |
| `lldkit.flyweight`  | Flyweight  | Shared player dresses in a game             |
| `lldkit.proxy`      | Proxy      | Rate-limiting `Nginx` in front of an `Application` |

Case studies

| Module                | Subject                                         |
|-----------------------|-------------------------------------------------|
| `lldkit.pricing`      | Minute-wise, fixed hourly and dynamic hourly parking fees |
| `lldkit.snake_ladder` | Snake and ladder                                |
| `lldkit.tictactoe`    | Tic-tac-toe on an N×N grid                      |

## A few examples

A rate-limiting proxy that lets each URL through at most twice:

```python
from lldkit.proxy import Nginx

server = Nginx()
print(server.handle_request("/app/status", "GET"))  # (200, 'Ok')
print(server.handle_request("/app/status", "GET"))  # (200, 'Ok')
print(server.handle_request("/app/status", "GET"))  # (403, 'Not Allowed')
```

Choosing a product family at run time:

```python
from lldkit.abstract_factory import BrandType, get_sports_factory

factory = get_sports_factory(BrandType.NIKE)
print(factory.make_shirt(14).logo_and_type())  # NikeShirt: Logo: nike, Size: 14
```

A facade over account checks, security codes, the wallet and the ledger:

```python
from lldkit.facade import PaymentError, WalletFacade

wallet = WalletFacade("abc", 1234)
wallet.add_money_to_wallet("abc", 1234, 10)
try:
    wallet.deduct_money_from_wallet("abc", 1234, 50)
except PaymentError as err:
    print(err)  # Balance is not sufficient
```

Working out a parking fee; every started hour is charged:

```python
from datetime import datetime, timedelta
from lldkit.pricing import PricingStrategyType, new_pricing_strategy

strategy = new_pricing_strategy(PricingStrategyType.FIXED_HOURLY)
entry = datetime(2024, 1, 1, 9, 0)
print(strategy.calculate_price(entry, entry + timedelta(minutes=90)))  # 80
```

Errors that the patterns report (an empty command history, an action the
vending machine does not allow in its current state, a refused wallet
payment, an invalid board position and so on) are raised as exceptions
defined in the module concerned, such as `EmptyHistoryError`,
`VendingMachineError`, `PaymentError`, `GameError` and `TicTacToeError`.

## Commands

Two demonstrations can be run from the command line:

```
lldkit-singleton [--once] [--count N]
```

starts `N` threads (50 by default) that all ask for the same lazily created
instance; "Creating single instance now." is printed only once. With
`--once` the instance is created through a run-once guard instead of
double-checked locking.

```
lldkit-snake-ladder [--seed SEED]
```

plays a full game of snake and ladder between Alice, Bob and Carol on a
100-cell board, printing every roll until someone wins. `--seed` makes the
die's rolls repeatable.

## What is not included

There is no parking-lot model: no vehicles, parking spots, spot managers,
entrance and exit gates or tickets. Only the pricing strategies that such a
lot would charge with are provided, in `lldkit.pricing`, and they work on
plain entry and exit times.