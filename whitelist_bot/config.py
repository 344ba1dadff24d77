"""Bot configuration loaded once from the environment (and an optional .env file)."""

import logging
import os

from dotenv import load_dotenv
from nacl.signing import VerifyKey

logger = logging.getLogger(__name__)

load_dotenv()

DEFAULT_FIREWALL_NAME = "Minecraft-Pass"
DEFAULT_PORT = 3000


class Config:
    """Service configuration initialized from environment variables."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if Config._initialized:
            return

        # Load Discord public key
        public_key_hex = os.getenv("DISCORD_PUBLIC_KEY")
        if not public_key_hex:
            raise ValueError("DISCORD_PUBLIC_KEY environment variable is required")

        try:
            self.public_key = VerifyKey(bytes.fromhex(public_key_hex))
        except Exception as e:
            raise ValueError(f"Invalid DISCORD_PUBLIC_KEY: {e}") from e

        self.application_id = os.getenv("DISCORD_APPLICATION_ID", "")
        self.bot_token = os.getenv("DISCORD_BOT_TOKEN", "")
        self.digital_ocean_token = os.getenv("DIGITAL_OCEAN_KEY", "")
        self.firewall_name = os.getenv("FIREWALL_NAME", DEFAULT_FIREWALL_NAME)
        self.admin_username = os.getenv("FIREWALL_ADMIN_USERNAME") or None

        try:
            self.port = int(os.getenv("PORT", str(DEFAULT_PORT)))
        except ValueError as e:
            raise ValueError(f"Invalid PORT: {e}") from e

        if not self.digital_ocean_token:
            logger.warning("DIGITAL_OCEAN_KEY is not set, firewall updates will fail")

        self._firewall_updater = None
        Config._initialized = True

    @property
    def firewall_updater(self):
        """Updater for the whitelist firewall, built on first use."""
        if self._firewall_updater is None:
            from .firewall import DigitalOceanClient, FirewallUpdater

            self._firewall_updater = FirewallUpdater(
                DigitalOceanClient(self.digital_ocean_token),
                firewall_name=self.firewall_name,
            )
        return self._firewall_updater


def get_config() -> Config:
    """Get the singleton configuration instance."""
    return Config()


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment."""
    Config._instance = None
    Config._initialized = False
