"""Prompt handling module for specagent."""

from .generator import PromptGenerator
from .templates import SYSTEM_PROMPT_TEMPLATE

__all__ = ["PromptGenerator", "SYSTEM_PROMPT_TEMPLATE"]
