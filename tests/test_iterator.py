from unittest import mock

import pytest

from lldkit.iterator import (
    Facebook,
    Linkedin,
    Profile,
    ProfileIterator,
    ProfileNotFoundError,
    SocialSpammer,
    SpamError,
)

ANNA = "anna@example.com"
MAX = "max@example.com"
BILLIE = "billie@example.com"
SAM = "sam@example.com"


def _no_wait():
    return None


@pytest.fixture
def profiles():
    return [
        Profile("Anna Smith", ANNA, f"friends:{MAX}", f"friends:{SAM}", f"coworkers:{BILLIE}"),
        Profile("Maximilian", MAX, f"friends:{ANNA}", f"coworkers:{BILLIE}"),
        Profile("Billie", BILLIE, f"coworkers:{ANNA}"),
        Profile("Sam Kitting", SAM, f"coworkers:{MAX}", f"friends:{ANNA}"),
    ]


def test_profile_parses_typed_and_untyped_contacts():
    profile = Profile("Anna", ANNA, f"friends:{MAX}", BILLIE, f"coworkers:{SAM}")
    assert profile.contacts("friends") == [MAX]
    assert profile.contacts("friend") == [BILLIE]
    assert profile.contacts("coworkers") == [SAM]
    assert profile.contacts("family") == []


def test_profile_rejects_bad_contact():
    with pytest.raises(ValueError, match="invalid contact format"):
        Profile("Anna", ANNA, "a:b:c")


def test_request_profile_finds_by_email(profiles):
    network = Facebook(profiles, latency=_no_wait)
    assert network.request_profile(MAX).name == "Maximilian"


def test_request_unknown_profile_raises(profiles):
    network = Linkedin(profiles, latency=_no_wait)
    with pytest.raises(ProfileNotFoundError, match="doesn't exists"):
        network.request_profile("nobody@example.com")


def test_friends_iterator_yields_profiles_in_order(profiles):
    network = Facebook(profiles, latency=_no_wait)
    emails = [p.email for p in network.create_friends_iterator(ANNA)]
    assert emails == [MAX, SAM]


def test_coworkers_iterator(profiles):
    network = Linkedin(profiles, latency=_no_wait)
    emails = [p.email for p in network.create_coworkers_iterator(SAM)]
    assert emails == [MAX]


def test_get_next_exhausts_and_reset_restarts(profiles):
    network = Facebook(profiles, latency=_no_wait)
    itr = network.create_friends_iterator(ANNA)
    assert itr.get_next().email == MAX
    assert itr.get_next().email == SAM
    assert itr.has_next() is False
    with pytest.raises(IndexError, match="no more data"):
        itr.get_next()
    itr.reset()
    assert itr.has_next() is True
    assert itr.get_next().email == MAX


def test_iterator_for_unknown_profile_raises(profiles):
    network = Facebook(profiles, latency=_no_wait)
    with pytest.raises(ProfileNotFoundError):
        network.create_friends_iterator("nobody@example.com")


def test_iterator_does_not_advance_on_failed_load():
    network = Facebook([Profile("Anna", ANNA, "friends:ghost@example.com")], latency=_no_wait)
    itr = ProfileIterator(network, "friends", ANNA)
    with pytest.raises(ProfileNotFoundError):
        itr.get_next()
    assert itr.has_next() is True


def test_latency_is_called_per_request(profiles):
    calls = []
    network = Facebook(profiles, latency=lambda: calls.append(1))
    emails = [p.email for p in network.create_friends_iterator(ANNA)]
    assert emails == [MAX, SAM]
    assert len(calls) == 3


def test_network_output_names_network(profiles, capsys):
    Linkedin(profiles, latency=_no_wait).request_profile(MAX)
    assert f'LinkedIn: Loading profile "{MAX}" over the network...' in capsys.readouterr().out


def test_spammer_sends_to_friends(profiles, capsys):
    spammer = SocialSpammer(Facebook(profiles, latency=_no_wait))
    sent = spammer.send_spam_to_friends(ANNA, "hello")
    assert sent == [MAX, SAM]
    out = capsys.readouterr().out
    assert "Iterating over friends..." in out
    assert f'Sent message to: "{SAM}". Message body: "hello"' in out


def test_spammer_sends_to_coworkers(profiles):
    spammer = SocialSpammer(Linkedin(profiles, latency=_no_wait))
    assert spammer.send_spam_to_coworkers(MAX, "hi") == [BILLIE]


def test_spammer_wraps_unknown_profile_error(profiles):
    spammer = SocialSpammer(Facebook(profiles, latency=_no_wait))
    with pytest.raises(SpamError, match="sending spam to coworkers failed") as info:
        spammer.send_spam_to_coworkers("nobody@example.com", "hi")
    assert isinstance(info.value.__cause__, ProfileNotFoundError)


def test_spammer_wraps_missing_contact_error():
    network = Facebook([Profile("Anna", ANNA, "friends:ghost@example.com")], latency=_no_wait)
    with pytest.raises(SpamError, match="sending spam to friends failed"):
        SocialSpammer(network).send_spam_to_friends(ANNA, "hi")


def test_default_latency_sleeps_whole_seconds(profiles):
    with mock.patch("lldkit.iterator.time.sleep") as sleep:
        sent = SocialSpammer(Facebook(profiles)).send_spam_to_friends(ANNA, "hi")
    assert sent == [MAX, SAM]
    assert sleep.call_count == 3
    assert all(call.args[0] in (1, 2) for call in sleep.call_args_list)