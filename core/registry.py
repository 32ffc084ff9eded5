from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Iterator, Optional, Tuple, Type

from mcp.types import Tool

from client.repository_client import RepositoryClient
from core.models import (
    CreateOrUpdateFileRequest,
    CreateRepositoryRequest,
    GetFileContentsRequest,
    PushFilesRequest,
    SearchRepositoriesRequest,
    ToolRequest,
    ToolResult,
)
from tools.create_or_update_file import create_or_update_file
from tools.create_repository import create_repository
from tools.get_file_contents import get_file_contents
from tools.push_files import push_files
from tools.search_repositories import search_repositories

Handler = Callable[[Any, RepositoryClient], Awaitable[ToolResult]]


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    request_model: Type[ToolRequest]
    handler: Handler

    @property
    def input_schema(self) -> Dict[str, Any]:
        return self.request_model.model_json_schema(by_alias=True)

    def to_tool(self) -> Tool:
        return Tool(name=self.name, description=self.description, inputSchema=self.input_schema)


class ToolRegistry:
    """Ordered, read-only catalog of the tools this server exposes."""

    def __init__(self, descriptors: Tuple[ToolDescriptor, ...]):
        self._descriptors = tuple(descriptors)
        self._by_name: Dict[str, ToolDescriptor] = {}
        for descriptor in self._descriptors:
            if descriptor.name in self._by_name:
                raise ValueError(f"Tool '{descriptor.name}' registered twice")
            self._by_name[descriptor.name] = descriptor

    def __iter__(self) -> Iterator[ToolDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Optional[ToolDescriptor]:
        return self._by_name.get(name)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(descriptor.name for descriptor in self._descriptors)

    def list_tools(self) -> list[Tool]:
        return [descriptor.to_tool() for descriptor in self._descriptors]


GITHUB_TOOLS: Tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name="create_repository",
        description="Create a new GitHub repository in your account or in an organization",
        request_model=CreateRepositoryRequest,
        handler=create_repository,
    ),
    ToolDescriptor(
        name="search_repositories",
        description="Search for GitHub repositories",
        request_model=SearchRepositoriesRequest,
        handler=search_repositories,
    ),
    ToolDescriptor(
        name="get_file_contents",
        description="Get the contents of a file or directory from a GitHub repository",
        request_model=GetFileContentsRequest,
        handler=get_file_contents,
    ),
    ToolDescriptor(
        name="create_or_update_file",
        description="Create or update a single file in a GitHub repository",
        request_model=CreateOrUpdateFileRequest,
        handler=create_or_update_file,
    ),
    ToolDescriptor(
        name="push_files",
        description="Push multiple files to a GitHub repository in a single commit",
        request_model=PushFilesRequest,
        handler=push_files,
    ),
)

registry = ToolRegistry(GITHUB_TOOLS)
