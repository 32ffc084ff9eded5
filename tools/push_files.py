"""Multi-file commit composer behind the ``push_files`` tool.

One push is a fixed chain of Git database calls:

    read ref -> read commit -> create blobs (fan-out) -> create tree
             -> create commit -> update ref

Each step takes the typed output of the one before it. Blob creation is the
only step that fans out; everything else is strictly sequential.

Known race: the branch tip is read once, at the start, and is not re-checked
before the final ref update. If another writer advances the branch in
between, the new commit is still parented on the stale tip. The ref update
is sent without ``force``, so whether the concurrent push is overwritten or
the update is refused is left entirely to GitHub.

Blob fan-out: when one blob upload fails, the error reaches the handler as
soon as it happens. Sibling uploads already handed to worker threads keep
running after the handler has returned its error result; the blobs they
create stay unreferenced, like any other blob from an aborted push.
"""

import asyncio
from dataclasses import dataclass
from typing import List, Optional

from client.repository_client import REGULAR_FILE_MODE, RemoteRepositoryError, RepositoryClient
from config.logging_config import get_logger
from config.settings import settings
from core.models import FileEntry, PushFilesRequest, ToolResult, error_result, success_result

logger = get_logger("tools.push_files")


@dataclass(frozen=True)
class BranchTip:
    ref: str
    commit_sha: str


@dataclass(frozen=True)
class BaseSnapshot:
    commit_sha: str
    tree_sha: str


@dataclass(frozen=True)
class StagedBlob:
    path: str
    sha: str

    def tree_entry(self) -> dict:
        return {"path": self.path, "mode": REGULAR_FILE_MODE, "type": "blob", "sha": self.sha}


@dataclass(frozen=True)
class PushOutcome:
    commit: dict
    ref: dict

    def to_payload(self) -> dict:
        return {"commit": self.commit, "ref": self.ref}


class MultiFileCommitComposer:
    """Builds one commit holding every file of a push and moves the branch to it."""

    def __init__(self, client: RepositoryClient, owner: str, repo: str, max_concurrent_blobs: Optional[int] = None):
        self.client = client
        self.owner = owner
        self.repo = repo
        self._blob_slots = asyncio.Semaphore(max_concurrent_blobs or settings.MAX_CONCURRENT_BLOBS)

    async def resolve_branch_tip(self, branch: str) -> BranchTip:
        ref = f"heads/{branch}"
        data = await self.client.get_ref(self.owner, self.repo, ref)
        return BranchTip(ref=ref, commit_sha=data["object"]["sha"])

    async def read_base_snapshot(self, tip: BranchTip) -> BaseSnapshot:
        data = await self.client.get_commit(self.owner, self.repo, tip.commit_sha)
        return BaseSnapshot(commit_sha=tip.commit_sha, tree_sha=data["tree"]["sha"])

    async def _stage_blob(self, entry: FileEntry) -> StagedBlob:
        async with self._blob_slots:
            data = await self.client.create_blob(self.owner, self.repo, entry.content)
        return StagedBlob(path=entry.path, sha=data["sha"])

    async def stage_blobs(self, files: List[FileEntry]) -> List[StagedBlob]:
        # gather keeps input order; the first failure propagates
        return list(await asyncio.gather(*(self._stage_blob(entry) for entry in files)))

    async def build_tree(self, snapshot: BaseSnapshot, blobs: List[StagedBlob]) -> str:
        data = await self.client.create_tree(
            self.owner,
            self.repo,
            tree=[blob.tree_entry() for blob in blobs],
            base_tree=snapshot.tree_sha,
        )
        return data["sha"]

    async def create_commit(self, message: str, tree_sha: str, snapshot: BaseSnapshot) -> dict:
        return await self.client.create_commit(
            self.owner,
            self.repo,
            message=message,
            tree=tree_sha,
            parents=[snapshot.commit_sha],
        )

    async def advance_branch(self, tip: BranchTip, commit_sha: str) -> dict:
        return await self.client.update_ref(self.owner, self.repo, tip.ref, commit_sha)

    async def push(self, branch: str, message: str, files: List[FileEntry]) -> PushOutcome:
        step = "read ref"
        try:
            tip = await self.resolve_branch_tip(branch)
            step = "read commit"
            snapshot = await self.read_base_snapshot(tip)
            step = "create blobs"
            blobs = await self.stage_blobs(files)
            step = "create tree"
            tree_sha = await self.build_tree(snapshot, blobs)
            step = "create commit"
            commit = await self.create_commit(message, tree_sha, snapshot)
            step = "update ref"
            ref = await self.advance_branch(tip, commit["sha"])
        except RemoteRepositoryError as e:
            logger.warning("push to %s/%s@%s stopped at '%s': %s", self.owner, self.repo, branch, step, e.message)
            raise

        logger.info(
            "Pushed %d file(s) to %s/%s@%s: %s -> %s",
            len(files), self.owner, self.repo, branch, tip.commit_sha, commit["sha"],
        )
        return PushOutcome(commit=commit, ref=ref)


async def push_files(request: PushFilesRequest, client: RepositoryClient) -> ToolResult:
    """
    Push several files to a branch as a single commit.

    Files not listed keep their current content; nothing is deleted.

    Args:
        request: Owner, repo, branch, commit message and the files to write
        client: Remote repository client

    Returns:
        ToolResult with {"commit": ..., "ref": ...} as JSON, or one error
        result if any step failed
    """
    composer = MultiFileCommitComposer(client, request.owner, request.repo)
    try:
        outcome = await composer.push(request.branch, request.message, request.files)
        return success_result(outcome.to_payload())
    except RemoteRepositoryError as e:
        return error_result(f"Error pushing files: {e.message}")
