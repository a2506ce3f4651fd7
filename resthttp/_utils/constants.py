# Environment variables
ENV_BASE_URL = "RESTHTTP_BASE_URL"
ENV_USERNAME = "RESTHTTP_USERNAME"
ENV_PASSWORD = "RESTHTTP_PASSWORD"
ENV_ACCEPT = "RESTHTTP_ACCEPT"
ENV_DISABLE_SSL_VERIFY = "RESTHTTP_DISABLE_SSL_VERIFY"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

# Media types
JSON_MEDIA_TYPE = "application/json"

# Transport defaults (seconds)
DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_CONNECT_TIMEOUT = 30.0
DEFAULT_TCP_KEEPALIVE = 30
DEFAULT_MAX_IDLE_CONNECTIONS = 100
DEFAULT_IDLE_CONNECTION_TIMEOUT = 90.0
