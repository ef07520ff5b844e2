"""Default settings for skiptools."""

# Key introducing the configuration block at the end of a tool description
SKIP_BLOCK_KEY = "skip"

# Query words shorter than this only take part in substring matching
MIN_WORD_LENGTH = 3
