import json
from typing import Any, Dict, List, Optional

from mcp.types import CallToolResult, TextContent
from pydantic import BaseModel, ConfigDict, Field

# The protocol envelope every handler returns.
ToolResult = CallToolResult


class ToolRequest(BaseModel):
    """Base for tool arguments: closed, addressed by their protocol names."""

    model_config = ConfigDict(extra="forbid")


class CreateRepositoryRequest(ToolRequest):
    name: str = Field(description="Repository name")
    description: Optional[str] = Field(None, description="Repository description")
    private: Optional[bool] = Field(None, description="Whether the repository should be private")
    auto_init: Optional[bool] = Field(None, alias="autoInit", description="Initialize with README.md")
    org: Optional[str] = Field(None, description="Optional: organization name to create the repository in")


class SearchRepositoriesRequest(ToolRequest):
    query: str = Field(description="Search query (see GitHub search syntax)")
    page: int = Field(1, description="Page number for pagination (default: 1)")
    per_page: int = Field(30, alias="perPage", description="Number of results per page (default: 30, max: 100)")


class GetFileContentsRequest(ToolRequest):
    owner: str = Field(description="Repository owner (username or organization)")
    repo: str = Field(description="Repository name")
    path: str = Field(description="Path to the file or directory")
    branch: Optional[str] = Field(None, description="Branch to get contents from")


class CreateOrUpdateFileRequest(ToolRequest):
    owner: str = Field(description="Repository owner (username or organization)")
    repo: str = Field(description="Repository name")
    path: str = Field(description="Path where to create/update the file")
    content: str = Field(description="Content of the file")
    message: str = Field(description="Commit message")
    branch: str = Field(description="Branch to create/update the file in")
    sha: Optional[str] = Field(
        None, description="SHA of the file being replaced (required when updating existing files)")


class FileEntry(ToolRequest):
    path: str
    content: str


class PushFilesRequest(ToolRequest):
    owner: str = Field(description="Repository owner (username or organization)")
    repo: str = Field(description="Repository name")
    branch: str = Field(description="Branch to push to (e.g., 'main' or 'master')")
    files: List[FileEntry] = Field(description="Array of files to push")
    message: str = Field(description="Commit message")


class ToolInvocation(BaseModel):
    name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)


def success_result(payload: Any) -> ToolResult:
    """Wrap a remote response body as pretty-printed JSON."""
    return ToolResult(
        content=[TextContent(type="text", text=json.dumps(payload, indent=2))],
        isError=False,
    )


def error_result(message: str) -> ToolResult:
    return ToolResult(
        content=[TextContent(type="text", text=message)],
        isError=True,
    )


def result_text(result: ToolResult) -> str:
    return "".join(block.text for block in result.content if isinstance(block, TextContent))
