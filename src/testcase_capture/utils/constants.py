"""Constants for endpoints, transport and generated documents."""

# Endpoint resolution
DEFAULT_PDP = "http://localhost:17779"
DEFAULT_PATH = "/$"
DEFAULT_METHOD = "GET"

# HTTP configuration
REQUEST_TIMEOUT = 10.0
USER_AGENT = "testcase-capture/1.0"
HTTP_PROTOCOL = "HTTP/1.1"

# Transcript markers
REQUEST_PREFIX = ">"
RESPONSE_PREFIX = "<"

# Generated snapshots
GENERATED_TITLE = "<Generated testcase>"
DEFAULT_MATCH_PATTERN = ".*"
