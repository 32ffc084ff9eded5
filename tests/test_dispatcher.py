"""Tests for OperationDispatcher routing and argument validation."""

import pytest
from mcp.shared.exceptions import McpError
from mcp.types import METHOD_NOT_FOUND

from core.models import ToolInvocation, result_text


@pytest.mark.asyncio
async def test_unknown_tool_is_a_protocol_fault(dispatcher, repo_client):
    with pytest.raises(McpError) as exc_info:
        await dispatcher.dispatch(ToolInvocation(name="delete_repository", arguments={"repo": "x"}))

    assert exc_info.value.error.code == METHOD_NOT_FOUND
    assert "delete_repository" in exc_info.value.error.message
    assert repo_client.method_calls == []


@pytest.mark.asyncio
async def test_tool_lookup_is_case_sensitive(dispatcher):
    with pytest.raises(McpError):
        await dispatcher.call("Push_Files", {})


@pytest.mark.asyncio
async def test_routes_to_matching_handler(dispatcher, repo_client):
    repo_client.search_repositories.return_value = {"total_count": 0, "items": []}

    result = await dispatcher.call("search_repositories", {"query": "fastmcp"})

    assert result.isError is False
    repo_client.search_repositories.assert_awaited_once_with(query="fastmcp", page=1, per_page=30)


@pytest.mark.asyncio
async def test_camel_case_arguments_reach_handler(dispatcher, repo_client):
    repo_client.create_repository_for_user.return_value = {"name": "site"}

    await dispatcher.call("create_repository", {"name": "site", "autoInit": True})

    repo_client.create_repository_for_user.assert_awaited_once_with(
        name="site", description=None, private=None, auto_init=True
    )


@pytest.mark.asyncio
async def test_unknown_argument_is_rejected_without_remote_call(dispatcher, repo_client):
    result = await dispatcher.call("create_repository", {"name": "site", "visibility": "internal"})

    assert result.isError is True
    assert result_text(result).startswith("Invalid arguments for create_repository:")
    assert "visibility" in result_text(result)
    assert repo_client.method_calls == []


@pytest.mark.asyncio
async def test_missing_required_argument_is_rejected(dispatcher, repo_client):
    result = await dispatcher.call("push_files", {"owner": "acme", "repo": "site", "branch": "main"})

    assert result.isError is True
    assert "files" in result_text(result)
    assert "message" in result_text(result)
    assert repo_client.method_calls == []


@pytest.mark.asyncio
async def test_unknown_field_inside_file_entry_is_rejected(dispatcher, repo_client):
    result = await dispatcher.call("push_files", {
        "owner": "acme",
        "repo": "site",
        "branch": "main",
        "message": "update",
        "files": [{"path": "a.txt", "content": "hi", "mode": "100755"}],
    })

    assert result.isError is True
    assert "files.0.mode" in result_text(result)
    assert repo_client.method_calls == []


@pytest.mark.asyncio
async def test_push_files_through_dispatcher(dispatcher, branch_at_c1):
    result = await dispatcher.call("push_files", {
        "owner": "acme",
        "repo": "site",
        "branch": "main",
        "message": "update",
        "files": [{"path": "a.txt", "content": "hi"}],
    })

    assert result.isError is False
    branch_at_c1.update_ref.assert_awaited_once_with("acme", "site", "heads/main", "C2")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "tool, arguments, field",
    [
        ("search_repositories", {"query": "q", "per_page": 5}, "per_page"),
        ("create_repository", {"name": "site", "auto_init": True}, "auto_init"),
    ],
)
async def test_snake_case_argument_names_are_rejected(dispatcher, repo_client, tool, arguments, field):
    result = await dispatcher.call(tool, arguments)

    assert result.isError is True
    assert field in result_text(result)
    assert repo_client.method_calls == []
