"""
Name: specagent package.
Description: Defines the package version and exports the generic OpenAPI invocation tool, establishing specagent as a package for letting conversational agents call any API described by an OpenAPI spec.
"""

__version__ = "0.1.0"

from .openapi.tools import OpenAPITool

__all__ = ["OpenAPITool"]
