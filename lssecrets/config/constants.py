"""
lssecrets Configuration Constants.

Centralized constants for the Secret Service API and the report layout.
"""

APP_NAME = "lssecrets"

# Well-known collection aliases, in display order
KNOWN_ALIASES = ("default", "login", "session")

# Secret Service D-Bus names
SECRETS_BUS_NAME = "org.freedesktop.secrets"
SECRETS_PATH = "/org/freedesktop/secrets"
SECRETS_PREFIX = "org.freedesktop.Secret."
SERVICE_IFACE = SECRETS_PREFIX + "Service"
COLLECTION_IFACE = SECRETS_PREFIX + "Collection"
ITEM_IFACE = SECRETS_PREFIX + "Item"
NO_OBJECT_PATH = "/"  # ReadAlias answer when nothing is bound

# Report layout
INDENT_UNIT = "  "
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
NULL_SECRET_MESSAGE = "secret is null"

# Default config location
CONFIG_ENV_VAR = "LSSECRETS_CONFIG"
