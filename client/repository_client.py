"""Async GitHub REST client used by every tool handler.

Wraps the authenticated PyGithub requester so each operation maps onto exactly
one REST call and returns the decoded JSON body unchanged. PyGithub is
blocking, so calls run in a worker thread and never stall the event loop.
"""

from __future__ import annotations

import asyncio
import base64
from typing import Any, Optional
from urllib.parse import quote

import requests
from github import Github, GithubException

from config.logging_config import get_logger

logger = get_logger("repository_client")

REGULAR_FILE_MODE = "100644"


class RemoteRepositoryError(Exception):
    """A GitHub call failed: auth, not-found, rate-limit, conflict or network."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status

    @classmethod
    def from_github_exception(cls, exc: GithubException) -> "RemoteRepositoryError":
        data = exc.data
        if isinstance(data, dict) and data.get("message"):
            message = str(data["message"])
        else:
            message = str(exc)
        return cls(message, status=exc.status)


def encode_content(content: str) -> str:
    """Base64 of the UTF-8 bytes of ``content``, as GitHub expects it."""
    return base64.b64encode(content.encode("utf-8")).decode("ascii")


def _compact(payload: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in payload.items() if value is not None}


def _repo_path(owner: str, repo: str) -> str:
    return f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"


class RepositoryClient:
    """Remote repository operations over one authenticated ``Github`` client."""

    def __init__(self, github: Github):
        self._github = github

    async def _request(
        self,
        verb: str,
        url: str,
        parameters: Optional[dict[str, Any]] = None,
        body: Optional[dict[str, Any]] = None,
    ) -> Any:
        logger.debug("%s %s", verb, url)
        return await asyncio.to_thread(self._request_sync, verb, url, parameters, body)

    def _request_sync(
        self,
        verb: str,
        url: str,
        parameters: Optional[dict[str, Any]],
        body: Optional[dict[str, Any]],
    ) -> Any:
        try:
            _, data = self._github.requester.requestJsonAndCheck(
                verb, url, parameters=parameters, input=body
            )
        except GithubException as e:
            raise RemoteRepositoryError.from_github_exception(e) from e
        except requests.RequestException as e:
            raise RemoteRepositoryError(str(e) or e.__class__.__name__) from e
        return data

    # Repositories

    async def create_repository_for_user(
        self,
        name: str,
        description: Optional[str] = None,
        private: Optional[bool] = None,
        auto_init: Optional[bool] = None,
    ) -> dict:
        body = _compact({
            "name": name,
            "description": description,
            "private": private,
            "auto_init": auto_init,
        })
        return await self._request("POST", "/user/repos", body=body)

    async def create_repository_in_org(
        self,
        org: str,
        name: str,
        description: Optional[str] = None,
        private: Optional[bool] = None,
        auto_init: Optional[bool] = None,
    ) -> dict:
        body = _compact({
            "name": name,
            "description": description,
            "private": private,
            "auto_init": auto_init,
        })
        return await self._request("POST", f"/orgs/{quote(org, safe='')}/repos", body=body)

    async def search_repositories(self, query: str, page: int = 1, per_page: int = 30) -> dict:
        parameters = {"q": query, "page": page, "per_page": per_page}
        return await self._request("GET", "/search/repositories", parameters=parameters)

    # Contents

    async def get_content(self, owner: str, repo: str, path: str, ref: Optional[str] = None) -> Any:
        url = f"{_repo_path(owner, repo)}/contents/{quote(path)}"
        parameters = _compact({"ref": ref}) or None
        return await self._request("GET", url, parameters=parameters)

    async def create_or_update_file(
        self,
        owner: str,
        repo: str,
        path: str,
        content: str,
        message: str,
        branch: str,
        sha: Optional[str] = None,
    ) -> dict:
        url = f"{_repo_path(owner, repo)}/contents/{quote(path)}"
        body = _compact({
            "message": message,
            "content": encode_content(content),
            "branch": branch,
            "sha": sha,
        })
        return await self._request("PUT", url, body=body)

    # Git database

    async def get_ref(self, owner: str, repo: str, ref: str) -> dict:
        return await self._request("GET", f"{_repo_path(owner, repo)}/git/ref/{quote(ref)}")

    async def get_commit(self, owner: str, repo: str, commit_sha: str) -> dict:
        return await self._request("GET", f"{_repo_path(owner, repo)}/git/commits/{commit_sha}")

    async def create_blob(self, owner: str, repo: str, content: str) -> dict:
        body = {"content": encode_content(content), "encoding": "base64"}
        return await self._request("POST", f"{_repo_path(owner, repo)}/git/blobs", body=body)

    async def create_tree(self, owner: str, repo: str, tree: list[dict], base_tree: Optional[str] = None) -> dict:
        body = _compact({"base_tree": base_tree, "tree": tree})
        return await self._request("POST", f"{_repo_path(owner, repo)}/git/trees", body=body)

    async def create_commit(self, owner: str, repo: str, message: str, tree: str, parents: list[str]) -> dict:
        body = {"message": message, "tree": tree, "parents": parents}
        return await self._request("POST", f"{_repo_path(owner, repo)}/git/commits", body=body)

    async def update_ref(self, owner: str, repo: str, ref: str, sha: str) -> dict:
        body = {"sha": sha}
        return await self._request("PATCH", f"{_repo_path(owner, repo)}/git/refs/{quote(ref)}", body=body)
