"""
Name: MCP Server.
Description: Provides the MCP Server implementation that exposes the generic OpenAPI invocation tool, the system prompt and the raw spec to an MCP client, which acts as the orchestration loop.
"""

import logging
from typing import Annotated, Any, Dict, Optional

from fastmcp import Context, FastMCP
from fastmcp.resources import TextResource
from pydantic import Field, ValidationError

from ..constants import DEFAULT_SYSTEM_PROMPT_NAME, SPEC_RESOURCE_URI
from ..openapi.models import QueryValue
from ..openapi.tools import OpenAPITool
from ..render import render_rejection
from .config import MCPToolsetConfig

logger = logging.getLogger(__name__)


class MCPServer:
    """MCP Server implementation."""

    def __init__(
        self,
        config: MCPToolsetConfig,
        tool: Optional[OpenAPITool] = None,
    ):
        """Initialize an MCP server.

        Args:
            config: MCP toolset configuration
            tool: Optional preconfigured invocation tool
        """
        self.config = config
        self.tool = tool or OpenAPITool(
            default_headers=config.default_headers, timeout=config.timeout
        )

        # Create FastMCP instance
        self.mcp = self._create_mcp_instance()

    def _create_mcp_instance(self) -> FastMCP:
        """Create a FastMCP instance for this server.

        Returns:
            FastMCP instance
        """
        mcp = FastMCP(self.config.name, instructions=self.config.api_description or None)

        @mcp.tool(name=self.tool.name, description=self.tool.description)
        async def openapi_tool(
            ctx: Context,
            base_url: str,
            endpoint: str,
            method: Annotated[
                str, Field(description="HTTP method: GET, POST, PUT, DELETE or PATCH")
            ],
            query_params: Optional[Dict[str, QueryValue]] = None,
            body: Optional[Dict[str, Any]] = None,
            headers: Optional[Dict[str, str]] = None,
        ) -> Dict[str, Any]:
            """Execute a request against the API."""
            arguments = {
                "base_url": base_url,
                "endpoint": endpoint,
                "method": method,
                "query_params": query_params,
                "body": body,
                "headers": headers,
            }
            return await self.call_tool(ctx, **arguments)

        system_prompt = self.config.system_prompt

        @mcp.prompt(
            name=DEFAULT_SYSTEM_PROMPT_NAME,
            description=f"System prompt for working with the {self.config.name} API",
        )
        def system_prompt_fn() -> str:
            """System prompt embedding the OpenAPI specification."""
            return system_prompt

        uri = SPEC_RESOURCE_URI.format(server_name=self.config.server_name)
        logger.debug(f"Registering spec resource: {uri}")
        mcp.add_resource(
            TextResource(
                uri=uri,
                name=f"{self.config.name} OpenAPI specification",
                description="Raw OpenAPI specification text",
                text=self.config.spec_text,
                mime_type="text/plain",
            )
        )

        return mcp

    async def call_tool(self, ctx: Optional[Context], **arguments: Any) -> Dict[str, Any]:
        """Run one invocation for an MCP client.

        Loading events are forwarded as log notifications; the terminal event
        is returned as the tool result.

        Args:
            ctx: FastMCP request context, or None outside a request
            **arguments: Fields of the call description

        Returns:
            The terminal event as a dictionary

        Raises:
            ValueError: If the arguments are not a valid call description
        """
        try:
            events = self.tool.invoke(arguments)
        except ValidationError as e:
            logger.info(f"Rejected tool input: {e.error_count()} error(s)")
            raise ValueError(render_rejection(e)) from e

        terminal = None
        async for event in events:
            if not event.is_terminal:
                if ctx is not None:
                    await ctx.info(event.message)
                continue
            terminal = event

        return terminal.to_dict()


def create_server_from_config(
    mcp_config: MCPToolsetConfig, tool: Optional[OpenAPITool] = None
) -> "MCPServer":
    """Create an MCP server from a configuration object.

    Args:
        mcp_config: MCP toolset configuration object
        tool: Optional preconfigured invocation tool

    Returns:
        MCP server
    """
    return MCPServer(config=mcp_config, tool=tool)
