from client.repository_client import RemoteRepositoryError, RepositoryClient
from config.logging_config import get_logger
from core.models import CreateRepositoryRequest, ToolResult, error_result, success_result

logger = get_logger("tools.create_repository")


async def create_repository(request: CreateRepositoryRequest, client: RepositoryClient) -> ToolResult:
    """
    Create a new GitHub repository in the authenticated account or in an organization.

    Args:
        request: Repository name plus optional description, visibility,
                 auto-init flag and organization
        client: Remote repository client

    Returns:
        ToolResult with the created repository as JSON, or an error result
    """
    try:
        if request.org:
            repo = await client.create_repository_in_org(
                org=request.org,
                name=request.name,
                description=request.description,
                private=request.private,
                auto_init=request.auto_init
            )
        else:
            repo = await client.create_repository_for_user(
                name=request.name,
                description=request.description,
                private=request.private,
                auto_init=request.auto_init
            )
        return success_result(repo)
    except RemoteRepositoryError as e:
        logger.warning("create_repository %s failed: %s", request.name, e.message)
        return error_result(f"Error creating repository: {e.message}")
