from fastmcp import FastMCP
from mcp import types
from config.logging_config import get_logger
from config.settings import settings
from core.dispatcher import OperationDispatcher
from core.models import ToolInvocation
from typing import Optional

logger = get_logger("server")


class ServerManager:
    def __init__(self, server_name: Optional[str] = None):
        self.server_name: str = server_name or settings.GITHUB_SERVER_NAME
        self.version: str = settings.SERVER_VERSION
        self._server: Optional[FastMCP] = None
        self._dispatcher: Optional[OperationDispatcher] = None

    @property
    def server(self) -> FastMCP:
        if not self._server:
            raise RuntimeError("Server not initialized. Call server_implementation first.")
        return self._server

    @property
    def is_initialised(self) -> bool:
        return self._server is not None

    @property
    def is_bound(self) -> bool:
        return self._dispatcher is not None

    def server_implementation(self, instructions: str = "") -> FastMCP:
        """Initializes the FastMCP server instance."""
        self._server = FastMCP(
            name=self.server_name,
            instructions=instructions
        )
        return self._server

    def bind_dispatcher(self, dispatcher: OperationDispatcher) -> None:
        """
        Serve tools/list and tools/call straight from the registry and dispatcher.

        The handlers replace FastMCP's own on its protocol server, so clients
        see the registry's closed input schemas, and an McpError raised for an
        unknown tool goes back as a JSON-RPC error instead of a tool result.
        """
        protocol_server = self.server._mcp_server

        async def list_tools(request: types.ListToolsRequest) -> types.ServerResult:
            return types.ServerResult(types.ListToolsResult(tools=dispatcher.registry.list_tools()))

        async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
            invocation = ToolInvocation(name=request.params.name, arguments=request.params.arguments or {})
            return types.ServerResult(await dispatcher.dispatch(invocation))

        protocol_server.request_handlers[types.ListToolsRequest] = list_tools
        protocol_server.request_handlers[types.CallToolRequest] = call_tool
        self._dispatcher = dispatcher

    def run(self, transport: str = "stdio") -> None:
        if not self.is_bound:
            raise RuntimeError("No dispatcher bound. Call bind_dispatcher first.")

        logger.info("GitHub MCP server %s v%s running on %s", self.server_name, self.version, transport)
        self.server.run(transport=transport)
