"""
Name: MCP Configuration classes.
Description: Shared configuration types for the MCP server implementation to avoid circular imports.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field


class MCPToolsetConfig(BaseModel):
    """Configuration for an MCP toolset."""

    name: str
    api_description: str = ""
    spec_text: str
    system_prompt: str

    # Applied to every call made through the tool; caller headers still win
    default_headers: Dict[str, str] = Field(default_factory=dict)
    timeout: Optional[float] = None

    @property
    def server_name(self) -> str:
        """Get the standardized server name (lowercase with underscores).

        Returns:
            Standardized server name for use in URLs and file paths
        """
        return self.name.lower().replace(" ", "_") if self.name else ""
