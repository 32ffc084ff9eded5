from github import Github, Auth
from config.settings import settings, Settings, ConfigurationError
from typing import Optional


class GitHubClientManager:
    def __init__(self, config: Optional[Settings] = None):
        self.config: Settings = config or settings
        self._github_client: Github | None = None

    @property
    def is_initialised(self) -> bool:
        return self._github_client is not None

    def get_github_client(self) -> Github:
        if self._github_client is not None:
            return self._github_client

        token = self.config.GITHUB_PERSONAL_ACCESS_TOKEN
        if not token:
            raise ConfigurationError("GITHUB_PERSONAL_ACCESS_TOKEN not set in environment")

        self._github_client = Github(
            auth=Auth.Token(token),
            base_url=self.config.GITHUB_API_URL,
            timeout=self.config.GITHUB_TIMEOUT,
        )
        return self._github_client

    def close(self) -> None:
        if self._github_client is not None:
            self._github_client.close()
            self._github_client = None


GithubObj = GitHubClientManager()
