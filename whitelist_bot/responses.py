"""Reply payloads for Discord interactions."""

from django.http import JsonResponse

from .firewall import AddIpOutcome, AddIpResult

# Response types
RESPONSE_TYPE_PONG = 1
RESPONSE_TYPE_CHANNEL_MESSAGE_WITH_SOURCE = 4


def pong() -> JsonResponse:
    """Acknowledge a ping."""
    return JsonResponse({"type": RESPONSE_TYPE_PONG})


def channel_message(content: str, mentions: list | None = None) -> JsonResponse:
    """Reply with a message in the channel the command was invoked from."""
    data = {"content": content}
    if mentions:
        data["mentions"] = mentions
    return JsonResponse({"type": RESPONSE_TYPE_CHANNEL_MESSAGE_WITH_SOURCE, "data": data})


def error(message: str, status: int = 400) -> JsonResponse:
    """Reply with an error body and HTTP status."""
    return JsonResponse({"error": message}, status=status)


def add_ip_message(result: AddIpResult, admin_username: str | None = None) -> JsonResponse:
    """Build the channel reply for the outcome of an add-minecraft-ip command."""
    address = result.address
    outcome = result.outcome

    if outcome is AddIpOutcome.ADDED:
        return channel_message(f"Added `{address}`!")
    if outcome is AddIpOutcome.INVALID:
        return channel_message(f"IP Address `{address}` is invalid")
    if outcome is AddIpOutcome.NOT_FOUND:
        mentions = [{"username": admin_username}] if admin_username else None
        return channel_message("Firewall was not found", mentions=mentions)
    if outcome is AddIpOutcome.DUPLICATE:
        return channel_message(f"`{address}` is already whitelisted")
    if outcome is AddIpOutcome.UPSTREAM_FAILURE:
        return channel_message(f"Updating firewall failed, status: {result.status}")
    return channel_message("Something went **TERRIBLY** wrong")
