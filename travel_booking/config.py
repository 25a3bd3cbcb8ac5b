import argparse
import logging
import os

import keyring
import keyring.errors
import streamlit as st
from dotenv import load_dotenv

from travel_booking.errors import ConfigurationError

load_dotenv()


def parse_args():
    """Parse command-line arguments passed after -- in streamlit run."""
    parser = argparse.ArgumentParser(description="Travel Booking App")
    parser.add_argument(
        "--local",
        action="store_true",
        help="Run in local mode: load backend credentials from keyring/environment",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    # Streamlit passes its own arguments through; ignore them
    args, _ = parser.parse_known_args()
    return args


APP_ARGS = parse_args()
LOCAL_MODE = APP_ARGS.local
DEBUG_MODE = APP_ARGS.debug

KEYRING_SERVICE = "travel-booking"

# Setting name -> keyring entry
KEYRING_KEYS = {
    "SUPABASE_URL": "supabase_url",
    "SUPABASE_KEY": "supabase_anon_key",
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging() -> None:
    """Configure root logging once for the app process."""
    level = "DEBUG" if DEBUG_MODE else os.getenv("LOG_LEVEL", "INFO")
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def get_setting(name: str) -> str:
    """Get a setting based on deployment mode.

    Local mode: Load from keyring, fall back to environment variables.
    Remote mode: Load from Streamlit secrets, fall back to environment variables.
    """
    if not LOCAL_MODE:
        try:
            if hasattr(st, "secrets") and name in st.secrets:
                return st.secrets[name]
        except Exception:
            # No secrets.toml present
            pass
        return os.getenv(name, "")

    key_name = KEYRING_KEYS.get(name, "")
    if key_name:
        try:
            value = keyring.get_password(KEYRING_SERVICE, key_name)
            if value:
                return value
        except keyring.errors.KeyringError:
            pass

    return os.getenv(name, "")


def save_setting(name: str, value: str) -> bool:
    """Save a setting to keyring. Only supported in local mode."""
    if not value or not LOCAL_MODE:
        return False

    key_name = KEYRING_KEYS.get(name, "")
    if not key_name:
        return False

    try:
        keyring.set_password(KEYRING_SERVICE, key_name, value)
        return True
    except keyring.errors.KeyringError:
        return False


def delete_setting(name: str) -> bool:
    """Delete a setting from keyring. Only supported in local mode."""
    if not LOCAL_MODE:
        return False

    key_name = KEYRING_KEYS.get(name, "")
    if not key_name:
        return False

    try:
        keyring.delete_password(KEYRING_SERVICE, key_name)
        return True
    except keyring.errors.KeyringError:
        return False


def get_supabase_credentials() -> tuple[str, str]:
    """Return the backend URL and anon key.

    Raises:
        ConfigurationError: If either value is missing
    """
    url = get_setting("SUPABASE_URL")
    key = get_setting("SUPABASE_KEY")
    if not url or not key:
        raise ConfigurationError(
            "Backend is not configured. Set SUPABASE_URL and SUPABASE_KEY in Settings or the environment."
        )
    return url, key
