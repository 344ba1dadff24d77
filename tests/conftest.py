"""pytest configuration: Django settings, signing key and a fake DigitalOcean API."""

import copy
import os

import django
import pytest

from whitelist_bot.cli import get_test_keys

_, TEST_PUBLIC_KEY = get_test_keys()

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "whitelist_bot.settings")
os.environ["DISCORD_PUBLIC_KEY"] = TEST_PUBLIC_KEY
os.environ["DIGITAL_OCEAN_KEY"] = "test-do-token"
os.environ.pop("FIREWALL_NAME", None)
os.environ.pop("FIREWALL_ADMIN_USERNAME", None)

django.setup()

from whitelist_bot.config import get_config, reset_config  # noqa: E402
from whitelist_bot.firewall import FirewallUpdater  # noqa: E402


class FakeDigitalOcean:
    """In-memory stand-in for DigitalOceanClient that records every call."""

    def __init__(self, firewalls=None, update_status=200):
        self.firewalls = firewalls if firewalls is not None else []
        self.update_status = update_status
        self.list_calls = []
        self.updates = []

    def list_firewalls(self, per_page=100):
        self.list_calls.append(per_page)
        return copy.deepcopy(self.firewalls)

    def update_firewall(self, firewall):
        self.updates.append(copy.deepcopy(firewall))
        if self.update_status == 200:
            self.firewalls = [
                copy.deepcopy(firewall) if f["id"] == firewall["id"] else f for f in self.firewalls
            ]
        return self.update_status

    @property
    def call_count(self):
        return len(self.list_calls) + len(self.updates)


def make_firewall(name="Minecraft-Pass", addresses=None, rules=2, firewall_id="fw-1"):
    addresses = addresses or []
    return {
        "id": firewall_id,
        "name": name,
        "status": "succeeded",
        "inbound_rules": [
            {
                "protocol": "tcp",
                "ports": str(25565 + i),
                "sources": {"addresses": list(addresses)},
            }
            for i in range(rules)
        ],
        "outbound_rules": [],
        "droplet_ids": [1234],
        "tags": [],
    }


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def digital_ocean():
    return FakeDigitalOcean(firewalls=[make_firewall(name="Other"), make_firewall(firewall_id="fw-2")])


@pytest.fixture
def updater(digital_ocean):
    return FirewallUpdater(digital_ocean, firewall_name="Minecraft-Pass")


@pytest.fixture
def configured_updater(updater):
    """Install the fake-backed updater on the shared configuration."""
    get_config()._firewall_updater = updater
    return updater
