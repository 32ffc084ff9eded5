from typing import Any, Dict, Optional

from mcp.shared.exceptions import McpError
from mcp.types import METHOD_NOT_FOUND, ErrorData
from pydantic import ValidationError

from client.repository_client import RepositoryClient
from config.logging_config import get_logger
from core.models import ToolInvocation, ToolResult, error_result
from core.registry import ToolRegistry

logger = get_logger("dispatcher")


def _describe_validation_error(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "arguments"
        problems.append(f"{location}: {item['msg']}")
    return "; ".join(problems)


class OperationDispatcher:
    """Routes tool invocations to their handlers by exact tool name."""

    def __init__(self, registry: ToolRegistry, client: RepositoryClient):
        self.registry = registry
        self.client = client

    async def dispatch(self, invocation: ToolInvocation) -> ToolResult:
        """
        Run one tool invocation.

        Raises:
            McpError: METHOD_NOT_FOUND when no tool has that name. Every other
                      failure comes back as a ToolResult with isError set.
        """
        descriptor = self.registry.get(invocation.name)
        if descriptor is None:
            raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {invocation.name}"))

        try:
            request = descriptor.request_model.model_validate(invocation.arguments or {})
        except ValidationError as e:
            logger.debug("Rejected arguments for %s: %s", invocation.name, e)
            return error_result(f"Invalid arguments for {invocation.name}: {_describe_validation_error(e)}")

        logger.debug("Dispatching %s", invocation.name)
        return await descriptor.handler(request, self.client)

    async def call(self, tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        return await self.dispatch(ToolInvocation(name=tool_name, arguments=arguments or {}))
