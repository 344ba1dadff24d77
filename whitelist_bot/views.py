"""Discord webhook views for handling Discord interactions.

This module handles Discord interactions webhooks:
- Validates Ed25519 signatures on incoming requests
- Responds to Ping (type=1) with Pong (type=1)
- Answers the `test` slash command with a greeting
- Adds IP addresses to the Minecraft firewall for `add-minecraft-ip`
"""

import json
import logging
import time

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST
from nacl.exceptions import BadSignatureError

from . import responses
from .commands import CommandName, get_random_emoji
from .config import get_config

logger = logging.getLogger(__name__)

# Interaction types
INTERACTION_TYPE_PING = 1
INTERACTION_TYPE_APPLICATION_COMMAND = 2

# Maximum accepted age of a signed request, in seconds
SIGNATURE_MAX_AGE = 5


def validate_signature(signature_hex: str, timestamp: str, body: bytes) -> bool:
    """Validate Discord Ed25519 signature.

    Args:
        signature_hex: Hex-encoded Ed25519 signature
        timestamp: Unix timestamp string
        body: Raw request body bytes

    Returns:
        True if signature is valid, False otherwise
    """
    config = get_config()

    if not signature_hex or not timestamp:
        return False

    # Reject stale requests to limit replays
    try:
        ts = int(timestamp)
        if int(time.time()) - ts > SIGNATURE_MAX_AGE:
            return False
    except ValueError:
        return False

    # Verify signature: verify(timestamp + body)
    try:
        signature = bytes.fromhex(signature_hex)
        message = timestamp.encode() + body
        config.public_key.verify(message, signature)
        return True
    except (ValueError, BadSignatureError):
        return False


@require_GET
def test(request):
    """Liveness check endpoint."""
    return JsonResponse({"data": {"content": "Hello world!"}})


@csrf_exempt
@require_POST
def handle_interaction(request):
    """Handle Discord interaction webhook."""
    # Get raw body for signature verification
    body = request.body

    # Get signature headers
    signature = request.headers.get("X-Signature-Ed25519", "")
    timestamp = request.headers.get("X-Signature-Timestamp", "")

    if not validate_signature(signature, timestamp, body):
        logger.warning("Rejected interaction with invalid signature")
        return responses.error("invalid signature", status=401)

    try:
        interaction = json.loads(body)
    except json.JSONDecodeError:
        return responses.error("invalid JSON")

    # Ensure interaction is a dict (not null, array, or primitive)
    if not isinstance(interaction, dict):
        return responses.error("invalid JSON")

    interaction_type = interaction.get("type")

    if interaction_type == INTERACTION_TYPE_PING:
        return responses.pong()
    elif interaction_type == INTERACTION_TYPE_APPLICATION_COMMAND:
        return _handle_application_command(interaction)
    else:
        logger.error(f"unknown interaction type: {interaction_type}")
        return responses.error("unknown interaction type")


def _handle_application_command(interaction: dict):
    """Route an Application Command (slash command) to its handler."""
    data = interaction.get("data")
    if not isinstance(data, dict):
        data = {}

    name = data.get("name")
    command = CommandName.parse(name)
    if command is None:
        logger.error(f"unknown command: {name}")
        return responses.error("unknown command")

    return COMMAND_HANDLERS[command](data)


def _handle_test(data: dict):
    """Handle the test command - greet with a random emoji."""
    return responses.channel_message(f"hello world {get_random_emoji()}")


def _first_option_value(data: dict):
    """Value of the command's first option, or "" when options are missing or malformed."""
    options = data.get("options")
    if isinstance(options, list) and options and isinstance(options[0], dict):
        return options[0].get("value", "")
    return ""


def _handle_add_minecraft_ip(data: dict):
    """Whitelist the address given as the command's first option."""
    address = _first_option_value(data)

    config = get_config()
    result = config.firewall_updater.add_ip(address)
    return responses.add_ip_message(result, admin_username=config.admin_username)


COMMAND_HANDLERS = {
    CommandName.TEST: _handle_test,
    CommandName.ADD_MINECRAFT_IP: _handle_add_minecraft_ip,
}
