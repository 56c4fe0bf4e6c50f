"""Application-wide constants."""

PROJECT_NAME = "HomeHarbor API"
API_STR = "/api"
SCHEMA_VERSION = "v1"
