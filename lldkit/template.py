"""Template method: the steps of sending a one-time password."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass


class OtpChannel(ABC):
    """The steps of sending an OTP; subclasses fill in the channel details."""

    label = "OTP"

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def get_random_otp(self, otp_length: int) -> str:
        otp = "".join(str(self._rng.randrange(10)) for _ in range(otp_length))
        print(f"{self.label}: generating random otp {otp}")
        return otp

    def save_otp_to_cache(self, otp: str) -> None:
        print(f"{self.label}: Saving otp {otp} to cache")

    @abstractmethod
    def get_message(self, otp: str) -> str:
        """Return the text that carries the OTP."""

    @abstractmethod
    def send_notification(self, message: str) -> None:
        """Deliver the message."""


class Sms(OtpChannel):
    label = "SMS"

    def get_message(self, otp: str) -> str:
        return "SMS OTP for login is " + otp

    def send_notification(self, message: str) -> None:
        print(f"SMS: sending sms: {message}")


class Email(OtpChannel):
    label = "Email"

    def get_message(self, otp: str) -> str:
        return "Email OTP for login is " + otp

    def send_notification(self, message: str) -> None:
        print(f"Email: sending email: {message}")


@dataclass
class Otp:
    """Runs the OTP steps in a fixed order over a channel."""

    channel: OtpChannel

    def get_and_send_otp(self, otp_length: int) -> str:
        """Generate, cache and send an OTP; return it."""
        otp = self.channel.get_random_otp(otp_length)
        self.channel.save_otp_to_cache(otp)
        message = self.channel.get_message(otp)
        self.channel.send_notification(message)
        return otp