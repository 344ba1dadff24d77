"""Install the bot's slash commands with Discord."""

import logging

import requests

logger = logging.getLogger(__name__)

DISCORD_API_BASE = "https://discord.com/api/v10"
REQUEST_TIMEOUT = 10
USER_AGENT = "DiscordBot (https://github.com/discord/discord-example-app, 1.0.0)"


def install_global_commands(application_id: str, bot_token: str, commands: list, session=None) -> list:
    """Overwrite the application's global commands with `commands`.

    Args:
        application_id: Discord application ID
        bot_token: Bot token used for authorization
        commands: Command descriptors to register
        session: Optional requests session (defaults to a fresh one)

    Returns:
        The registered commands as returned by Discord

    Raises:
        ValueError: if the application ID or token is missing
        requests.HTTPError: if Discord rejects the request
    """
    if not application_id:
        raise ValueError("DISCORD_APPLICATION_ID is required to register commands")
    if not bot_token:
        raise ValueError("DISCORD_BOT_TOKEN is required to register commands")

    session = session or requests.Session()
    response = session.put(
        f"{DISCORD_API_BASE}/applications/{application_id}/commands",
        json=commands,
        headers={
            "Authorization": f"Bot {bot_token}",
            "Content-Type": "application/json; charset=UTF-8",
            "User-Agent": USER_AGENT,
        },
        timeout=REQUEST_TIMEOUT,
    )

    if not response.ok:
        logger.error(f"Failed to register commands ({response.status_code}): {response.text}")
        response.raise_for_status()

    registered = response.json()
    logger.info(f"Registered {len(registered)} global commands")
    return registered
