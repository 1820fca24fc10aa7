"""
Default configuration values for feedsource.

Note: The active config file is located by config/loader.py which supports
an environment variable (FEEDSOURCE_CONFIG), project config, and user config.
"""

# Directory and file names
APP_DIR_NAME = "feedsource"
PROJECT_DIR_NAME = ".feedsource"
CONFIG_FILE_NAME = "config.yaml"

# Environment variables
ENV_ROOT = "FEEDSOURCE_ROOT"
ENV_CONFIG = "FEEDSOURCE_CONFIG"

# Top-level keys understood in config.yaml
VALID_TOP_LEVEL_KEYS = frozenset({"hosts"})
