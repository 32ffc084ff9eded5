from client.repository_client import RemoteRepositoryError, RepositoryClient
from config.logging_config import get_logger
from core.models import GetFileContentsRequest, ToolResult, error_result, success_result

logger = get_logger("tools.get_file_contents")


async def get_file_contents(request: GetFileContentsRequest, client: RepositoryClient) -> ToolResult:
    """Read a file or list a directory, optionally from a specific branch."""
    try:
        contents = await client.get_content(
            owner=request.owner,
            repo=request.repo,
            path=request.path,
            ref=request.branch
        )
        return success_result(contents)
    except RemoteRepositoryError as e:
        logger.warning("get_file_contents %s/%s:%s failed: %s", request.owner, request.repo, request.path, e.message)
        return error_result(f"Error getting file contents: {e.message}")
