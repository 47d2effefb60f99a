"""
Name: Prompt generator.
Description: Provides PromptGenerator for building the system prompt that teaches a reasoning process how to read an OpenAPI specification and how to call the generic invocation tool.
"""

import logging
from typing import Optional

from ..constants import DEFAULT_TOOL_NAME
from .templates import SYSTEM_PROMPT_TEMPLATE

logger = logging.getLogger(__name__)


class PromptGenerator:
    """Generator for the system prompt of an API assistant."""

    def __init__(
        self,
        api_name: str,
        spec_text: str,
        api_description: str = "",
        tool_name: str = DEFAULT_TOOL_NAME,
        template: Optional[str] = None,
    ):
        """Initialize the prompt generator.

        Args:
            api_name: Name of the API
            spec_text: Raw OpenAPI specification text, embedded verbatim
            api_description: Optional description of the API
            tool_name: Name under which the invocation tool is exposed
            template: Optional replacement for the default system prompt template
        """
        self.api_name = api_name
        self.spec_text = spec_text
        self.api_description = api_description
        self.tool_name = tool_name
        self.template = template or SYSTEM_PROMPT_TEMPLATE

    def generate_system_prompt(self) -> str:
        """Generate the system prompt.

        Returns:
            The formatted system prompt
        """
        description = ""
        if self.api_description:
            description = f"\n## About the API\n\n{self.api_description.strip()}\n"

        # Only the template is formatted; braces inside the spec text are inserted verbatim
        prompt = self.template.format(
            api_name=self.api_name,
            spec_text=self.spec_text.strip(),
            api_description=description,
            tool_name=self.tool_name,
        )
        logger.debug(
            f"Generated system prompt for {self.api_name} ({len(prompt)} characters)"
        )
        return prompt
