"""Constants shared by the server package."""

PROJECT_NAME = "deep-agent"
API_VERSION = "0.0.1"
API_PREFIX = "/api"
