from client.repository_client import RemoteRepositoryError, RepositoryClient
from config.logging_config import get_logger
from core.models import SearchRepositoriesRequest, ToolResult, error_result, success_result

logger = get_logger("tools.search_repositories")


async def search_repositories(request: SearchRepositoriesRequest, client: RepositoryClient) -> ToolResult:
    """
    Search GitHub repositories, one page at a time.

    Args:
        request: Search query, page number (default 1) and page size (default 30)
        client: Remote repository client

    Returns:
        ToolResult with the raw search response (total_count, items) as JSON
    """
    try:
        results = await client.search_repositories(
            query=request.query,
            page=request.page,
            per_page=request.per_page
        )
        return success_result(results)
    except RemoteRepositoryError as e:
        logger.warning("search_repositories %r failed: %s", request.query, e.message)
        return error_result(f"Error searching repositories: {e.message}")
