"""
Name: Command-line interface.
Description: Implements the command-line interface for specagent with commands for calling an API endpoint through the generic invocation tool, printing the tool schema, printing the system prompt for a spec and serving MCP instances.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

import anyio

from .constants import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_TIMEOUT
from .manager import start_mcp_server
from .openapi.models import CallDescription
from .openapi.tools import OpenAPITool
from .prompt.generator import PromptGenerator
from .render import render_event, render_pending, render_rejection
from .utils import describe_spec, load_spec_text, setup_environment

logger = logging.getLogger(__name__)


def parse_query_args(values: Optional[List[str]]) -> Optional[Dict[str, Any]]:
    """Parse repeated ``key=value`` arguments into query parameters.

    Values that parse as JSON (numbers, booleans, lists, null) keep their
    type; anything else is taken as a string.
    """
    if not values:
        return None

    params: Dict[str, Any] = {}
    for item in values:
        if "=" not in item:
            raise ValueError(f"Query parameter '{item}' must look like key=value")
        key, raw = item.split("=", 1)
        try:
            params[key] = json.loads(raw)
        except json.JSONDecodeError:
            params[key] = raw
    return params


def parse_header_args(values: Optional[List[str]]) -> Optional[Dict[str, str]]:
    """Parse repeated ``Name: value`` arguments into headers."""
    if not values:
        return None

    headers: Dict[str, str] = {}
    for item in values:
        if ":" not in item:
            raise ValueError(f"Header '{item}' must look like 'Name: value'")
        name, value = item.split(":", 1)
        headers[name.strip()] = value.strip()
    return headers


def build_call_arguments(args) -> Dict[str, Any]:
    """Collect the call description fields from parsed CLI arguments."""
    arguments: Dict[str, Any] = {
        "base_url": args.base_url,
        "endpoint": args.endpoint,
        "method": args.method,
    }
    query_params = parse_query_args(args.query)
    if query_params is not None:
        arguments["query_params"] = query_params
    if args.body is not None:
        arguments["body"] = json.loads(args.body)
    headers = parse_header_args(args.header)
    if headers is not None:
        arguments["headers"] = headers
    return arguments


async def _stream_call(tool: OpenAPITool, description: CallDescription, as_json: bool) -> bool:
    """Print every event of one invocation as it arrives.

    Returns:
        True if the invocation ended in success
    """
    succeeded = False
    async for event in tool.invoke(description):
        if as_json:
            print(json.dumps(event.to_dict()), flush=True)
        else:
            print(render_event(event), flush=True)
        succeeded = event.state == "success"
    return succeeded


def call_command(args):
    """Call an API endpoint and print the execution events."""
    # ValidationError and JSONDecodeError are both ValueErrors
    try:
        arguments = build_call_arguments(args)
        description = CallDescription.model_validate(arguments)
    except ValueError as e:
        print(render_rejection(e))
        sys.exit(1)

    if not args.json:
        print(render_pending(arguments))

    tool = OpenAPITool(timeout=args.timeout)
    succeeded = anyio.run(_stream_call, tool, description, args.json)
    if not succeeded:
        sys.exit(1)


def schema_command(args):
    """Print the invocation tool schema."""
    print(json.dumps(OpenAPITool().to_schema(), indent=2))


def prompt_command(args):
    """Print the system prompt for an OpenAPI spec."""
    try:
        spec_text = load_spec_text(args.spec)
    except OSError as e:
        logger.error(f"Error reading spec {args.spec}: {e}")
        sys.exit(1)

    title, description = describe_spec(spec_text)
    generator = PromptGenerator(
        api_name=args.name or title or "target",
        spec_text=spec_text,
        api_description=description,
    )
    print(generator.generate_system_prompt())


def serve_command(args):
    """Start MCP server(s) for agent configuration(s)."""
    try:
        start_mcp_server(
            config_paths=args.config,
            host=args.host,
            port=args.port,
            debug=args.debug,
        )
    except (OSError, ValueError) as e:
        logger.error(f"Error starting MCP server: {e}")
        sys.exit(1)


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="specagent - Call any API described by an OpenAPI spec"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Call command
    call_parser = subparsers.add_parser("call", help="Call an API endpoint")
    call_parser.add_argument(
        "--base-url", type=str, required=True, help="Base URL of the API"
    )
    call_parser.add_argument(
        "--endpoint", type=str, required=True, help="Endpoint path, e.g. /v1/forecast"
    )
    call_parser.add_argument(
        "--method", type=str, default="GET", help="HTTP method (default: GET)"
    )
    call_parser.add_argument(
        "--query",
        action="append",
        metavar="KEY=VALUE",
        help="Query parameter, may be repeated",
    )
    call_parser.add_argument("--body", type=str, help="JSON request body")
    call_parser.add_argument(
        "--header",
        action="append",
        metavar="'NAME: VALUE'",
        help="Request header, may be repeated",
    )
    call_parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="Timeout in seconds (default: wait indefinitely)",
    )
    call_parser.add_argument(
        "--json", action="store_true", help="Print events as JSON lines"
    )

    # Schema command
    subparsers.add_parser("schema", help="Print the invocation tool schema")

    # Prompt command
    prompt_parser = subparsers.add_parser(
        "prompt", help="Print the system prompt for an OpenAPI spec"
    )
    prompt_parser.add_argument(
        "--spec", type=str, required=True, help="Path to the OpenAPI spec file"
    )
    prompt_parser.add_argument(
        "--name", type=str, help="API name (defaults to the spec title)"
    )

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start MCP server(s)")
    serve_parser.add_argument(
        "--config",
        type=str,
        nargs="+",
        required=True,
        help="Path(s) to agent configuration files (JSON or YAML)",
    )
    serve_parser.add_argument(
        "--host", type=str, default=DEFAULT_HOST, help="Host to bind the server to"
    )
    serve_parser.add_argument(
        "--port", type=int, default=DEFAULT_PORT, help="Port to bind the server to"
    )

    args = parser.parse_args()
    setup_environment(args.debug)

    # Execute command
    if args.command == "call":
        call_command(args)
    elif args.command == "schema":
        schema_command(args)
    elif args.command == "prompt":
        prompt_command(args)
    elif args.command == "serve":
        serve_command(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
