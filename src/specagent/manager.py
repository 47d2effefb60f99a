"""
Name: Core functionality manager.
Description: Contains core functionality for processing agent configurations, loading OpenAPI spec text, generating the system prompt and starting MCP servers. Orchestrates the different components of specagent to create a complete MCP server.
"""

import logging
from typing import List

from .constants import DEFAULT_HOST, DEFAULT_PORT
from .mcp.server import MCPServer, MCPToolsetConfig
from .prompt.generator import PromptGenerator
from .utils import (
    AgentConfig,
    configure_logging,
    describe_spec,
    load_config_file,
    load_spec_text,
    load_spec_text_from_url,
    substitute_env_vars,
)

logger = logging.getLogger(__name__)


def process_config(config_path: str) -> AgentConfig:
    """Process an agent configuration file.

    Args:
        config_path: Path to the configuration file (JSON or YAML)

    Returns:
        Agent configuration with the spec text loaded
    """
    config_data = load_config_file(config_path)

    # Header values may reference environment variables, e.g. "{WEATHER_API_KEY}"
    headers = config_data.get("headers") or {}
    config_data["headers"] = {
        name: substitute_env_vars(value) for name, value in headers.items()
    }

    agent_config = AgentConfig(**config_data)

    if agent_config.spec_text is None:
        if agent_config.openapi_spec_path:
            logger.debug(f"Loading OpenAPI spec from {agent_config.openapi_spec_path}")
            agent_config.spec_text = load_spec_text(agent_config.openapi_spec_path)
        else:
            logger.debug(f"Loading OpenAPI spec from {agent_config.openapi_spec_url}")
            agent_config.spec_text = load_spec_text_from_url(
                agent_config.openapi_spec_url
            )

    return agent_config


def generate_system_prompt(agent_config: AgentConfig) -> str:
    """Generate the system prompt for an agent configuration.

    Args:
        agent_config: Agent configuration with its spec text loaded

    Returns:
        The system prompt
    """
    _, spec_description = describe_spec(agent_config.spec_text or "")
    generator = PromptGenerator(
        api_name=agent_config.name,
        spec_text=agent_config.spec_text or "",
        api_description=agent_config.description or spec_description,
    )
    return generator.generate_system_prompt()


def create_mcp_config(agent_config: AgentConfig) -> MCPToolsetConfig:
    """Create an MCP configuration from an agent configuration.

    Args:
        agent_config: Agent configuration

    Returns:
        MCP toolset configuration
    """
    return MCPToolsetConfig(
        name=agent_config.name,
        api_description=agent_config.description,
        spec_text=agent_config.spec_text or "",
        system_prompt=generate_system_prompt(agent_config),
        default_headers=agent_config.headers,
        timeout=agent_config.timeout,
    )


def start_mcp_server(
    config_paths: List[str],
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    debug: bool = False,
):
    """Start an MCP server with one or more agent configurations.

    Args:
        config_paths: Paths to agent configuration files
        host: Host to bind the server to
        port: Port to bind the server to
        debug: Whether to enable debug mode
    """
    from fastapi import FastAPI
    import uvicorn

    configure_logging(debug)
    logger.info(
        f"Starting MCP server on {host}:{port} with {len(config_paths)} API configs"
    )

    app = FastAPI(
        title="specagent server",
        description="MCP server exposing generic OpenAPI invocation tools",
    )
    mounted = []

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "apis": mounted}

    for config_path in config_paths:
        agent_config = process_config(config_path)
        server_name = agent_config.server_name

        server = MCPServer(config=create_mcp_config(agent_config))

        # Mount the FastMCP SSE sub-application at /{server_name}/mcp.
        app.mount(f"/{server_name}/mcp", server.mcp.http_app(transport="sse"))
        mounted.append(server_name)

        logger.info(f"Mounted MCP server for {agent_config.name} at /{server_name}/mcp")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level="debug" if debug else "warning",
    )
