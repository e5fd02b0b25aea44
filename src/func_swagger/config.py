"""Fixed document values and environment defaults."""

SWAGGER_VERSION = "2.0"
API_VERSION = "1.0.0"
BASE_PATH = "/"
ROUTE_PREFIX = "/api/"

DEFAULT_VERBS = ("get", "post", "delete", "head", "patch", "put", "options")

JSON_MEDIA_TYPE = "application/json"

# Tenant header every operation requires
TENANT_HEADER = "TouchpointId"

SECURITY_SCHEME = "apikeyQuery"
SECURITY_DEFINITIONS = {
    SECURITY_SCHEME: {"type": "apiKey", "name": "code", "in": "query"},
}

SUMMARY_MAX_LENGTH = 80

LOOPBACK_HOSTS = ("localhost", "127.0.0.1")

ENV_PREFIX = "FUNC_SWAGGER"
