"""Default locations for config and credentials."""

DEFAULT_CONFIG_PATH = "configs/default.yaml"

# Environment variables consulted for the provider credential, in order.
API_KEY_ENV_VARS: tuple[str, ...] = ("OPENWEATHER_API_KEY", "API_KEY")

CONFIG_PATH_ENV_VAR = "WEATHERPROXY_CONFIG"
