"""Constants used throughout the application."""

# Only files with this suffix are loaded
JSON_SUFFIX = ".json"

# Infix used to rename numeric component tags: <0> -> <Trans0>
TRANS_TAG_PREFIX = "Trans"

# Separator for object paths in reports: greeting.title
OBJECT_PATH_SEPARATOR = "."
