from client.repository_client import RemoteRepositoryError, RepositoryClient
from config.logging_config import get_logger
from core.models import CreateOrUpdateFileRequest, ToolResult, error_result, success_result

logger = get_logger("tools.create_or_update_file")


async def create_or_update_file(request: CreateOrUpdateFileRequest, client: RepositoryClient) -> ToolResult:
    """
    Create or overwrite a single file with one commit.

    Args:
        request: Target file, its new content, commit message and branch.
                 sha must be the current blob SHA when the file already exists;
                 GitHub rejects the write otherwise.
        client: Remote repository client

    Returns:
        ToolResult with the content and commit returned by GitHub as JSON
    """
    try:
        result = await client.create_or_update_file(
            owner=request.owner,
            repo=request.repo,
            path=request.path,
            content=request.content,
            message=request.message,
            branch=request.branch,
            sha=request.sha
        )
        return success_result(result)
    except RemoteRepositoryError as e:
        logger.warning("create_or_update_file %s/%s:%s failed: %s", request.owner, request.repo, request.path, e.message)
        return error_result(f"Error creating or updating file: {e.message}")
