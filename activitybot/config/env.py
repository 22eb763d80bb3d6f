# path: activitybot/config/env.py
"""
Environment - Environment variable loading and typed accessors.
"""

import os
from pathlib import Path
from typing import Optional, Dict, List


REQUIRED_VARS = ("TELEGRAM_TOKEN",)

OPTIONAL_VARS = (
    "LOG_LEVEL",
    "LOG_FILE",
    "ENVIRONMENT",
    "DROP_PENDING_UPDATES",
    "ALLOWED_UPDATES",
    "WELCOME_TEXT"
)


def load_environment(env_file: Optional[str] = None) -> Optional[Path]:
    """
    Load environment variables from a .env file.

    Runs before logging is configured, so it reports with print.

    Args:
        env_file: Path to .env file (optional)

    Returns:
        The file that was loaded, or None
    """
    if env_file:
        env_path = Path(env_file)
    else:
        env_path = Path(".env")
        if not env_path.exists():
            env_path = Path(__file__).parent.parent.parent / ".env"

    if not env_path.exists():
        print("No .env file found, using system environment variables")
        return None

    for key, value in parse_dotenv(env_path.read_text()).items():
        os.environ.setdefault(key, value)

    print(f"Loaded environment from: {env_path}")
    return env_path


def parse_dotenv(content: str) -> Dict[str, str]:
    """
    Parse KEY=VALUE lines; blank lines and # comments are skipped.

    Args:
        content: Raw .env file text

    Returns:
        Parsed variables in file order
    """
    values: Dict[str, str] = {}

    for line in content.splitlines():
        line = line.strip()

        if not line or line.startswith("#") or "=" not in line:
            continue

        key, _, value = line.partition("=")
        value = value.strip()

        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]

        values[key.strip()] = value

    return values


def get_env(
    key: str,
    default: Optional[str] = None,
    required: bool = False
) -> Optional[str]:
    """
    Get an environment variable.

    Raises:
        EnvironmentError: If required and not set
    """
    value = os.getenv(key, default)

    if required and not value:
        raise EnvironmentError(f"Required environment variable not set: {key}")

    return value


def get_env_int(key: str, default: int = 0) -> int:
    """Get an environment variable as integer (default when unparsable)."""
    value = get_env(key)

    if value is None:
        return default

    try:
        return int(value)
    except ValueError:
        return default


def get_env_bool(key: str, default: bool = False) -> bool:
    """Get an environment variable as boolean."""
    value = get_env(key)

    if value is None:
        return default

    return value.strip().lower() in ("true", "1", "yes", "on")


def get_env_list(
    key: str,
    default: Optional[List[str]] = None,
    separator: str = ","
) -> List[str]:
    """Get an environment variable as a list of non-empty items."""
    value = get_env(key)

    if value is None:
        return list(default or [])

    return [item.strip() for item in value.split(separator) if item.strip()]


def validate_environment() -> dict:
    """
    Check which known variables are set.

    Returns:
        Dict with valid flag, missing_required, missing_optional and loaded
    """
    results = {
        "valid": True,
        "missing_required": [],
        "missing_optional": [],
        "loaded": []
    }

    for var in REQUIRED_VARS:
        if os.getenv(var):
            results["loaded"].append(var)
        else:
            results["missing_required"].append(var)
            results["valid"] = False

    for var in OPTIONAL_VARS:
        if os.getenv(var):
            results["loaded"].append(var)
        else:
            results["missing_optional"].append(var)

    return results
