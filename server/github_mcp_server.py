
import sys
from pathlib import Path
from typing import Optional

# Add parent directory to sys.path for modular imports
parent_dir = Path(__file__).resolve().parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

from client.github_manager import GithubObj
from client.repository_client import RepositoryClient
from config.logging_config import get_logger, setup_logging
from config.settings import ConfigurationError, settings
from core.dispatcher import OperationDispatcher
from core.registry import registry
from core.server_manager import ServerManager

logger = get_logger("server")

INSTRUCTIONS = (
    "GitHub tools for AI agents - create repositories (personal or organization), "
    "search repositories, read files and commit one or many files to a branch"
)


def create_server(dispatcher: OperationDispatcher, manager: Optional[ServerManager] = None) -> ServerManager:
    # 1. Initialize Manager
    manager = manager or ServerManager(server_name=settings.GITHUB_SERVER_NAME)

    # 2. Create Server Instance
    manager.server_implementation(instructions=INSTRUCTIONS)

    # 3. Tool Registration
    # Every tool in the registry is listed and called through the dispatcher
    manager.bind_dispatcher(dispatcher)
    return manager


def build_dispatcher() -> OperationDispatcher:
    client = RepositoryClient(GithubObj.get_github_client())
    return OperationDispatcher(registry, client)


def main() -> None:
    setup_logging(settings.LOG_LEVEL)
    try:
        settings.validate()
    except ConfigurationError as e:
        logger.critical("Cannot start GitHub MCP server: %s", e)
        sys.exit(1)

    manager = create_server(build_dispatcher())
    try:
        manager.run(transport='stdio')
    finally:
        GithubObj.close()


if __name__ == '__main__':
    main()
