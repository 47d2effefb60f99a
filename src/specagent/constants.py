"""
Name: Constants and settings.
Description: Centralized location for constants and settings used throughout specagent.
This file contains default values, HTTP method sets and user-facing messages to maintain consistency.
"""


# HTTP settings
BODY_METHODS = ("POST", "PUT", "PATCH")
DEFAULT_HEADERS = {"Content-Type": "application/json"}

# Timeout for a single invocation, in seconds. None disables the timeout.
DEFAULT_TIMEOUT = None

# Timeout used when downloading a spec document
DEFAULT_SPEC_DOWNLOAD_TIMEOUT = 30

# Tool settings
DEFAULT_TOOL_NAME = "openapi"
DEFAULT_TOOL_DESCRIPTION = """Execute API requests based on OpenAPI specifications.
This is a generic tool that can call any API endpoint defined in an OpenAPI spec.
Extract the base URL, endpoint path, method, and parameters from the OpenAPI specification before using this tool.

Important: The base URL must be extracted from the OpenAPI spec's 'servers' section or endpoint-specific servers."""

# Progress and outcome messages
PREPARING_MESSAGE = "Preparing API request..."
EXECUTING_MESSAGE = "Executing {method} {url}..."
SUCCESS_MESSAGE = "API request completed successfully"
PROTOCOL_FAILURE_MESSAGE = "API request failed with status {status_code}"
TRANSPORT_FAULT_MESSAGE = "Failed to execute API request"

# Server settings
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000
DEFAULT_SYSTEM_PROMPT_NAME = "system_prompt"
SPEC_RESOURCE_URI = "openapi://{server_name}/spec"
