"""
Command-line helpers for the whitelist bot.
Provides Ed25519 request signing, command registration and a local server.
"""

import argparse
import hashlib
import json
import logging
import os
import sys
import time
from typing import Optional, Tuple

import requests
from django.core.management import execute_from_command_line
from nacl.encoding import HexEncoder
from nacl.signing import SigningKey

from .commands import ALL_COMMANDS
from .config import get_config
from .registration import install_global_commands

# Deterministic key for signing sample requests locally
TEST_SEED = "whitelist-bot-ed25519-test-key-seed-v1"


def get_test_keys() -> Tuple[SigningKey, str]:
    """
    Generate deterministic test key pair from fixed seed.
    Returns (signing_key, public_key_hex).
    """
    seed = hashlib.sha256(TEST_SEED.encode()).digest()
    signing_key = SigningKey(seed)
    public_key_hex = signing_key.verify_key.encode(encoder=HexEncoder).decode()
    return signing_key, public_key_hex


def sign_request(body: bytes, timestamp: Optional[str] = None) -> Tuple[str, str]:
    """
    Sign a Discord interaction request.
    Returns (signature_hex, timestamp).
    """
    signing_key, _ = get_test_keys()

    if timestamp is None:
        timestamp = str(int(time.time()))

    # Discord signature format: sign(timestamp + body)
    message = timestamp.encode() + body
    signed = signing_key.sign(message)
    signature_hex = signed.signature.hex()

    return signature_hex, timestamp


def create_ping_request() -> bytes:
    """Create a Discord ping interaction request body."""
    return json.dumps({"type": 1}).encode()


def create_add_ip_request(ip_address: str) -> bytes:
    """Create an add-minecraft-ip slash command request body."""
    return json.dumps(
        {
            "type": 2,
            "id": "123456789",
            "application_id": "987654321",
            "token": "test-token",
            "guild_id": "111222333",
            "channel_id": "444555666",
            "data": {
                "id": "cmd123",
                "name": "add-minecraft-ip",
                "type": 1,
                "options": [{"name": "ipaddress", "type": 3, "value": ip_address}],
            },
            "member": {"user": {"id": "user123", "username": "testuser"}},
        }
    ).encode()


def _signed_output(body: bytes) -> str:
    """Sign body and render it with its signature headers as JSON."""
    sig, ts = sign_request(body)
    return json.dumps({"body": body.decode(), "signature": sig, "timestamp": ts})


def register_commands() -> int:
    """Push the bot's commands to Discord. Returns a process exit code."""
    application_id = os.getenv("DISCORD_APPLICATION_ID", "")
    bot_token = os.getenv("DISCORD_BOT_TOKEN", "")
    try:
        registered = install_global_commands(application_id, bot_token, ALL_COMMANDS)
    except (ValueError, requests.RequestException) as e:
        print(f"ERROR: Failed to register commands: {e}", file=sys.stderr)
        return 1

    for command in registered:
        print(command.get("name"))
    return 0


def serve() -> None:
    """Run the Django server on the configured PORT."""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "whitelist_bot.settings")
    port = get_config().port
    execute_from_command_line(["whitelist-bot", "runserver", "--noreload", f"0.0.0.0:{port}"])


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per helper."""
    parser = argparse.ArgumentParser(description="Whitelist bot utilities")
    subparsers = parser.add_subparsers(dest="command")

    # Get public key
    subparsers.add_parser("get-public-key", help="Get test public key hex")

    # Sign request
    sign_parser = subparsers.add_parser("sign", help="Sign a request body")
    sign_parser.add_argument("--body", required=True, help="Request body (JSON)")
    sign_parser.add_argument("--timestamp", help="Timestamp (default: current time)")

    # Create ping request
    subparsers.add_parser("create-ping", help="Create signed ping request")

    # Create add-minecraft-ip request
    add_ip_parser = subparsers.add_parser(
        "create-add-ip", help="Create signed add-minecraft-ip request"
    )
    add_ip_parser.add_argument("--ip", required=True, help="IP address to whitelist")

    # Register commands
    subparsers.add_parser("register-commands", help="Install slash commands with Discord")

    # Serve
    subparsers.add_parser("serve", help="Run the webhook server on PORT")

    return parser


def main(argv=None) -> int:
    """Run the CLI and return a process exit code."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "get-public-key":
        _, public_key = get_test_keys()
        print(public_key)

    elif args.command == "sign":
        body = args.body.encode()
        sig, ts = sign_request(body, args.timestamp)
        print(json.dumps({"signature": sig, "timestamp": ts}))

    elif args.command == "create-ping":
        print(_signed_output(create_ping_request()))

    elif args.command == "create-add-ip":
        print(_signed_output(create_add_ip_request(args.ip)))

    elif args.command == "register-commands":
        return register_commands()

    elif args.command == "serve":
        serve()

    else:
        parser.print_help()

    return 0


if __name__ == "__main__":
    sys.exit(main())
