"""
Application-level constants for hardcoded business logic.

These values describe the storage contract of the author profile and should
NEVER be changed via environment variables or configuration. Changing any of
them requires a database migration.

For configurable values (connection pools, log level, etc.), see
author_profile/settings.py where values can be overridden via environment
variables.
"""

import re

# ============================================================================
# Storage Contract
# ============================================================================

# Name of the table holding author profiles
AUTHOR_TABLE_NAME = "author"

# Size in bytes of the raw identifier column (128-bit UUID)
AUTHOR_ID_BYTES = 16

# Maximum lengths of the VARCHAR columns, in characters
AVATAR_URL_MAX_LENGTH = 255
ACTIVATION_TOKEN_MAX_LENGTH = 32
EMAIL_MAX_LENGTH = 128
HASH_MAX_LENGTH = 97
USERNAME_MAX_LENGTH = 32


# ============================================================================
# Substring Search
# ============================================================================

# Escape character used when a search term contains LIKE wildcards
LIKE_ESCAPE_CHAR = "\\"


# ============================================================================
# Column Layout
# ============================================================================

# Entity attribute -> storage column, in table order
AUTHOR_COLUMNS = {
    "id": "authorId",
    "avatar_url": "authorAvatarUrl",
    "activation_token": "authorActivationToken",
    "email": "authorEmail",
    "hash": "authorHash",
    "username": "authorUsername",
}

# Text attribute -> maximum length, in table order
AUTHOR_TEXT_LIMITS = {
    "avatar_url": AVATAR_URL_MAX_LENGTH,
    "activation_token": ACTIVATION_TOKEN_MAX_LENGTH,
    "email": EMAIL_MAX_LENGTH,
    "hash": HASH_MAX_LENGTH,
    "username": USERNAME_MAX_LENGTH,
}


# ============================================================================
# Identifier Format
# ============================================================================

# Canonical 8-4-4-4-12 hex form, ASCII digits only
AUTHOR_ID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}\Z"
)
