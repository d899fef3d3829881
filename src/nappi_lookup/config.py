import os
from dotenv import load_dotenv

# Load environment variables from a .env file at the root of the project
load_dotenv()

def get_config(key: str) -> str:
    """
    Retrieves a configuration value from the environment.

    The key must be present. A missing key raises a ValueError so the
    service never starts with an incomplete configuration (for example,
    without knowing where the NAPPI file lives).

    Args:
        key: The string name of the configuration variable to retrieve.

    Returns:
        The configuration value as a string.

    Raises:
        ValueError: If the configuration key is not found in the environment.
    """
    value = os.getenv(key)
    if value is None:
        raise ValueError(f"Error: Configuration key '{key}' not found in .env file.")
    return value


def get_int_config(key: str) -> int:
    """Same as get_config, converted to int. A non-numeric value raises ValueError."""
    value = get_config(key)
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Error: Configuration key '{key}' must be an integer, got '{value}'.")
