"""DigitalOcean firewall access and the add-IP read-modify-write sequence.

The updater:
- Validates the candidate IPv4 address before any remote call
- Looks up the whitelist firewall by name
- Refuses addresses already present in any inbound rule
- Appends the address to every inbound rule and submits the update
"""

import ipaddress
import logging
import threading
from dataclasses import dataclass
from enum import Enum

import requests

logger = logging.getLogger(__name__)

DIGITAL_OCEAN_API_BASE = "https://api.digitalocean.com/v2"
FIREWALL_PAGE_SIZE = 100
REQUEST_TIMEOUT = 10

# Fields accepted by PUT /v2/firewalls/{id}
UPDATABLE_FIELDS = ("name", "inbound_rules", "outbound_rules", "droplet_ids", "tags")

# Held across fetch/check/update of the firewall
_update_lock = threading.Lock()


class DigitalOceanClient:
    """Minimal client for the DigitalOcean firewalls API."""

    def __init__(self, token: str, base_url: str = DIGITAL_OCEAN_API_BASE, session=None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
            }
        )

    def list_firewalls(self, per_page: int = FIREWALL_PAGE_SIZE) -> list:
        """Return the first page of firewalls on the account."""
        response = self.session.get(
            f"{self.base_url}/firewalls",
            params={"per_page": per_page},
            timeout=REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        return response.json().get("firewalls", [])

    def update_firewall(self, firewall: dict) -> int:
        """Submit the whole firewall and return the HTTP status code."""
        body = {field: firewall[field] for field in UPDATABLE_FIELDS if field in firewall}
        response = self.session.put(
            f"{self.base_url}/firewalls/{firewall['id']}",
            json=body,
            timeout=REQUEST_TIMEOUT,
        )
        if response.status_code != 200:
            logger.warning(f"Firewall update returned {response.status_code}: {response.text}")
        return response.status_code


class AddIpOutcome(Enum):
    ADDED = "added"
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"
    UPSTREAM_FAILURE = "upstream_failure"
    ERROR = "error"


@dataclass(frozen=True)
class AddIpResult:
    outcome: AddIpOutcome
    address: str
    status: int | None = None


def is_ipv4(value) -> bool:
    """Check that value is a dotted-quad IPv4 address string."""
    if not isinstance(value, str):
        return False
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


def find_firewall(firewalls: list, name: str) -> dict | None:
    """Return the firewall called name, or None."""
    for firewall in firewalls:
        if firewall.get("name") == name:
            return firewall
    return None


def is_whitelisted(firewall: dict, address: str) -> bool:
    """Check whether any inbound rule already lists address."""
    return any(
        address in rule.get("sources", {}).get("addresses", [])
        for rule in firewall.get("inbound_rules", [])
    )


def append_address(firewall: dict, address: str) -> None:
    """Add address to the source list of every inbound rule, in place."""
    for rule in firewall.get("inbound_rules", []):
        sources = rule.setdefault("sources", {})
        sources.setdefault("addresses", []).append(address)


class FirewallUpdater:
    """Adds addresses to the named firewall's inbound rules."""

    def __init__(self, client: DigitalOceanClient, firewall_name: str):
        self.client = client
        self.firewall_name = firewall_name

    def add_ip(self, address) -> AddIpResult:
        """Whitelist address, returning the outcome instead of raising."""
        if not is_ipv4(address):
            logger.info(f"Rejected invalid IP address: {address!r}")
            return AddIpResult(AddIpOutcome.INVALID, str(address))

        try:
            with _update_lock:
                return self._add_ip_locked(address)
        except Exception:
            logger.exception(f"Failed to add {address} to firewall {self.firewall_name}")
            return AddIpResult(AddIpOutcome.ERROR, address)

    def _add_ip_locked(self, address: str) -> AddIpResult:
        firewalls = self.client.list_firewalls(per_page=FIREWALL_PAGE_SIZE)
        firewall = find_firewall(firewalls, self.firewall_name)
        if firewall is None:
            logger.warning(f"Firewall {self.firewall_name} not found")
            return AddIpResult(AddIpOutcome.NOT_FOUND, address)

        if is_whitelisted(firewall, address):
            return AddIpResult(AddIpOutcome.DUPLICATE, address)

        append_address(firewall, address)
        status = self.client.update_firewall(firewall)
        if status != 200:
            return AddIpResult(AddIpOutcome.UPSTREAM_FAILURE, address, status=status)

        logger.info(f"Added {address} to firewall {self.firewall_name}")
        return AddIpResult(AddIpOutcome.ADDED, address)
