"""Iterator pattern: walk a profile's contacts on a social network."""

from __future__ import annotations

import json
import random
import time
from collections.abc import Callable, Iterable


def simulate_network_latency() -> None:
    """Sleep for one or two whole seconds, like a slow network call."""
    time.sleep(int(1 + random.random() * 2))


def _q(text: str) -> str:
    return json.dumps(text)


class ProfileNotFoundError(LookupError):
    """Raised when a network has no profile with the requested e-mail."""


class SpamError(Exception):
    """Raised when sending messages to a profile's contacts fails."""


class Profile:
    """A user profile with contacts grouped by type.

    Each contact is given as ``"type:email"`` or just ``"email"``, in which
    case its type is ``"friend"``.
    """

    def __init__(self, name: str, email: str, *contacts: str) -> None:
        self.name = name
        self.email = email
        self._contacts: dict[str, list[str]] = {}
        for contact in contacts:
            parts = contact.split(":")
            if len(parts) == 1:
                contact_type, contact_email = "friend", parts[0]
            elif len(parts) == 2:
                contact_type, contact_email = parts
            else:
                raise ValueError("invalid contact format")
            self._contacts.setdefault(contact_type, []).append(contact_email)

    def contacts(self, contact_type: str) -> list[str]:
        """Return the e-mails of the contacts of the given type."""
        return list(self._contacts.get(contact_type, []))

    def __repr__(self) -> str:
        return f"Profile(name={self.name!r}, email={self.email!r})"


class ProfileIterator:
    """Walks one contact list of a profile, loading each profile lazily."""

    def __init__(self, network: SocialNetwork, contact_type: str, profile_email: str) -> None:
        self.network = network
        self.contact_type = contact_type
        self.profile_email = profile_email
        self.emails = network.request_profile_friends(profile_email, contact_type)
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self.emails)

    def get_next(self) -> Profile:
        if not self.has_next():
            raise IndexError("no more data")
        profile = self.network.request_profile(self.emails[self._position])
        self._position += 1
        return profile

    def reset(self) -> None:
        self._position = 0

    def __iter__(self) -> ProfileIterator:
        return self

    def __next__(self) -> Profile:
        if not self.has_next():
            raise StopIteration
        return self.get_next()


class SocialNetwork:
    """A network of profiles that are fetched as if over the wire."""

    label = "SocialNetwork"

    def __init__(
        self,
        profiles: Iterable[Profile],
        latency: Callable[[], None] = simulate_network_latency,
    ) -> None:
        self.profiles = list(profiles)
        self._latency = latency

    def request_profile(self, profile_email: str) -> Profile:
        self._latency()
        print(f"{self.label}: Loading profile {_q(profile_email)} over the network...")
        return self._find_profile(profile_email)

    def request_profile_friends(self, profile_email: str, contact_type: str) -> list[str]:
        self._latency()
        print(
            f"{self.label}: Loading {_q(contact_type)} list of profile "
            f"{_q(profile_email)} over the network..."
        )
        return self._find_profile(profile_email).contacts(contact_type)

    def create_friends_iterator(self, profile_email: str) -> ProfileIterator:
        return ProfileIterator(self, "friends", profile_email)

    def create_coworkers_iterator(self, profile_email: str) -> ProfileIterator:
        return ProfileIterator(self, "coworkers", profile_email)

    def _find_profile(self, profile_email: str) -> Profile:
        for profile in self.profiles:
            if profile.email == profile_email:
                return profile
        raise ProfileNotFoundError(f"profile {_q(profile_email)} doesn't exists")


class Facebook(SocialNetwork):
    label = "Facebook"


class Linkedin(SocialNetwork):
    label = "LinkedIn"


class SocialSpammer:
    """Sends a message to every contact of a given kind."""

    def __init__(self, network: SocialNetwork) -> None:
        self.network = network

    def send_spam_to_friends(self, profile_email: str, message: str) -> list[str]:
        """Message every friend; return the e-mails that were messaged."""
        return self._send_spam(
            "friends", self.network.create_friends_iterator, profile_email, message
        )

    def send_spam_to_coworkers(self, profile_email: str, message: str) -> list[str]:
        """Message every coworker; return the e-mails that were messaged."""
        return self._send_spam(
            "coworkers", self.network.create_coworkers_iterator, profile_email, message
        )

    def _send_spam(
        self,
        group: str,
        make_iterator: Callable[[str], ProfileIterator],
        profile_email: str,
        message: str,
    ) -> list[str]:
        print(f"\nIterating over {group}...")
        print()
        sent: list[str] = []
        try:
            for profile in make_iterator(profile_email):
                self._send_message(profile.email, message)
                sent.append(profile.email)
        except ProfileNotFoundError as err:
            raise SpamError(f"sending spam to {group} failed, error: {err}") from err
        return sent

    @staticmethod
    def _send_message(email: str, message: str) -> None:
        print(f"Sent message to: {_q(email)}. Message body: {_q(message)}")