"""Slash commands understood by the bot and their registration descriptors."""

import random
from enum import Enum

# Application command types
COMMAND_TYPE_CHAT_INPUT = 1

# Option types
OPTION_TYPE_STRING = 3

# Installation targets: guild install, user install
INTEGRATION_TYPES = [0, 1]

EMOJIS = ["😭", "😄", "😌", "🤓", "😎", "😤", "🤖", "😶‍🌫️", "🌏", "📸", "💿", "👋", "🌊", "✨"]


class CommandName(Enum):
    TEST = "test"
    ADD_MINECRAFT_IP = "add-minecraft-ip"

    @classmethod
    def parse(cls, name):
        """Return the matching command, or None for names the bot does not handle."""
        try:
            return cls(name)
        except ValueError:
            return None


TEST_COMMAND = {
    "name": CommandName.TEST.value,
    "description": "Basic command",
    "type": COMMAND_TYPE_CHAT_INPUT,
    "integration_types": INTEGRATION_TYPES,
    "contexts": [0, 1, 2],
}

ADD_MINECRAFT_IP_COMMAND = {
    "name": CommandName.ADD_MINECRAFT_IP.value,
    "description": "Adds IP address to the Minecraft server",
    "options": [
        {
            "type": OPTION_TYPE_STRING,
            "name": "ipaddress",
            "description": "Enter your IP Address",
            "required": True,
        },
    ],
    "type": COMMAND_TYPE_CHAT_INPUT,
    "integration_types": INTEGRATION_TYPES,
    "contexts": [0, 2],
}

ALL_COMMANDS = [TEST_COMMAND, ADD_MINECRAFT_IP_COMMAND]


def get_random_emoji() -> str:
    """Pick a random emoji for the greeting."""
    return random.choice(EMOJIS)
