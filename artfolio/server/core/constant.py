"""Server-wide constants."""

PROJECT_NAME = "Artfolio"
API_V1_STR = "/api/v1"
VERSION = "0.1.0"
SCHEMA_VERSION = "v1"

PLACEHOLDER_PROFILE_PICTURE = "https://placehold.co/128x128.png"

ARTWORKS_FOLDER = "artworks"
PROFILE_FOLDER = "profile"
