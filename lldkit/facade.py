"""Facade pattern: one wallet interface over several payment services."""

from __future__ import annotations

import json


def _q(text: str) -> str:
    return json.dumps(text)


class PaymentError(Exception):
    """Raised when a wallet operation is refused."""


class Account:
    def __init__(self, name: str) -> None:
        self.name = name

    def verify_account(self, account_name: str) -> None:
        if self.name != account_name:
            raise PaymentError(f"account name {_q(account_name)} is invalid")
        print("Account Verified", end="")


class SecurityCode:
    def __init__(self, code: int) -> None:
        self.code = code

    def verify_security_code(self, code: int) -> None:
        if self.code != code:
            raise PaymentError("Security Code is incorrect")
        print("SecurityCode Verified")


class Wallet:
    def __init__(self) -> None:
        self.balance = 0

    def credit_balance(self, amount: int) -> None:
        self.balance += amount
        print("Amount credited from wallet balance")

    def debit_balance(self, amount: int) -> None:
        if self.balance < amount:
            raise PaymentError("Balance is not sufficient")
        self.balance -= amount
        print("Amount deducted from wallet balance")


class Notification:
    def send_wallet_credit_notification(self, account_name: str, amount: int) -> None:
        print(f"Account {_q(account_name)} credited with amount {amount}")

    def send_wallet_debit_notification(self, account_name: str, amount: int) -> None:
        print(f"Account {_q(account_name)} debited with amount {amount}")


class Ledger:
    def make_entry(self, account_name: str, txn_type: str, txn_amount: int) -> None:
        print(
            f"Ledger entry created for accountName {_q(account_name)} "
            f"with txnType {_q(txn_type)} for amount {txn_amount}"
        )


class WalletFacade:
    """Checks the account and code, moves money, notifies and records."""

    def __init__(self, account_name: str, security_code: int) -> None:
        self.account = Account(account_name)
        self.security_code = SecurityCode(security_code)
        self.wallet = Wallet()
        self.notification = Notification()
        self.ledger = Ledger()

    def _verify(self, account_name: str, security_code: int) -> None:
        self.account.verify_account(account_name)
        self.security_code.verify_security_code(security_code)

    def add_money_to_wallet(self, account_name: str, security_code: int, amount: int) -> None:
        print("Starting adding money to wallet")
        self._verify(account_name, security_code)
        self.wallet.credit_balance(amount)
        self.notification.send_wallet_credit_notification(account_name, amount)
        self.ledger.make_entry(account_name, "CREDIT", amount)

    def deduct_money_from_wallet(
        self, account_name: str, security_code: int, amount: int
    ) -> None:
        print("Starting deducting money from wallet")
        self._verify(account_name, security_code)
        self.wallet.debit_balance(amount)
        self.notification.send_wallet_debit_notification(account_name, amount)
        self.ledger.make_entry(account_name, "DEBIT", amount)