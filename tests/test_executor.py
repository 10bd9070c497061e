"""Tool Executor Adapter Tests."""

import asyncio
import json

import pytest
from structlog.testing import capture_logs

from cloudphone_config.settings import PluginConfig
from cloudphone_tools.base import ToolMetadata, ToolResult, json_result, text_result
from cloudphone_tools.executor import ToolExecutor


class StubTool:
    """Tool returning (or raising) a canned value."""

    description = "Stub tool"
    parameters = {"type": "object", "properties": {}}
    metadata = ToolMetadata()

    def __init__(self, result=None, error: BaseException | None = None, name: str = "stub"):
        self.name = name
        self.result = result
        self.error = error
        self.calls = []

    async def execute(self, tool_call_id, input_data, config):
        self.calls.append((tool_call_id, input_data, config))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def executor():
    return ToolExecutor(PluginConfig(baseUrl="https://cloudphone.test"))


def only_text(result: ToolResult) -> str:
    assert len(result.content) == 1
    return result.content[0].text


@pytest.mark.asyncio
async def test_passes_config_to_tool(executor):
    """Test the executor hands its config to every call."""
    tool = StubTool(result=text_result("ok"))

    await executor.execute(tool, "call-1", {"a": 1})

    assert tool.calls == [("call-1", {"a": 1}, executor.config)]


@pytest.mark.asyncio
async def test_content_passes_through(executor):
    """Test a result with content is returned unchanged."""
    result = ToolResult.model_validate(
        {"content": [{"type": "text", "text": "one"}, {"type": "text", "text": "two"}]}
    )

    assert await executor.execute(StubTool(result=result), "call-1", {}) is result


@pytest.mark.asyncio
async def test_mapping_with_content_is_accepted(executor):
    """Test a plain dict envelope is validated into a ToolResult."""
    raw = {"content": [{"type": "text", "text": "hi"}]}

    result = await executor.execute(StubTool(result=raw), "call-1", {})

    assert result == text_result("hi")


@pytest.mark.asyncio
async def test_other_results_are_serialized(executor):
    """Test results without content become one JSON text item."""
    result = await executor.execute(StubTool(result={"ok": True, "n": 1}), "call-1", {})

    assert json.loads(only_text(result)) == {"ok": True, "n": 1}


@pytest.mark.asyncio
async def test_empty_content_is_serialized(executor):
    """Test an envelope with no items is serialized rather than passed through."""
    result = await executor.execute(StubTool(result=ToolResult(content=[])), "call-1", {})

    assert json.loads(only_text(result)) == {"content": []}


@pytest.mark.asyncio
async def test_missing_result_fallback(executor):
    """Test a None result yields the fallback message."""
    result = await executor.execute(StubTool(result=None, name="quiet"), "call-1", {})

    assert only_text(result) == "tool quiet returned no valid content"


@pytest.mark.asyncio
async def test_exception_becomes_error_envelope(executor):
    """Test a raising tool yields {ok: false, error}."""
    tool = StubTool(error=RuntimeError("boom"))

    result = await executor.execute(tool, "call-1", {})

    assert json.loads(only_text(result)) == {"ok": False, "error": "boom"}


@pytest.mark.asyncio
async def test_exception_without_message_uses_type_name(executor):
    """Test an exception with an empty message reports its type."""
    result = await executor.execute(StubTool(error=KeyError()), "call-1", {})

    assert json.loads(only_text(result)) == {"ok": False, "error": "KeyError"}


@pytest.mark.asyncio
async def test_cancellation_is_not_swallowed(executor):
    """Test host cancellation still propagates."""
    with pytest.raises(asyncio.CancelledError):
        await executor.execute(StubTool(error=asyncio.CancelledError()), "call-1", {})


@pytest.mark.asyncio
async def test_logs_invocation_and_result(executor):
    """Test start and completion are logged with id, params and result."""
    with capture_logs() as logs:
        await executor.execute(StubTool(result=text_result("hi")), "call-7", {"text": "hi"})

    started, completed = logs
    assert started["event"] == "tool_execution_started"
    assert started["tool"] == "stub"
    assert started["tool_call_id"] == "call-7"
    assert json.loads(started["params"]) == {"text": "hi"}
    assert completed["event"] == "tool_execution_completed"
    assert json.loads(completed["result"]) == {"content": [{"type": "text", "text": "hi"}]}


@pytest.mark.asyncio
async def test_logs_failure(executor):
    """Test failures are logged at error level."""
    with capture_logs() as logs:
        await executor.execute(StubTool(error=ValueError("bad input")), "call-1", {})

    failure = logs[-1]
    assert failure["event"] == "tool_execution_failed"
    assert failure["log_level"] == "error"
    assert failure["error"] == "bad input"


@pytest.mark.asyncio
async def test_bind_returns_wire_dict(executor):
    """Test the host-facing callable returns the plain envelope dict."""
    execute = executor.bind(StubTool(error=RuntimeError("boom")))

    result = await execute("call-1", {})

    assert result == {"content": [{"type": "text", "text": '{"ok": false, "error": "boom"}'}]}


@pytest.mark.asyncio
async def test_logs_mask_secrets(executor):
    """Test credentials in params and results are masked in log events."""
    tool = StubTool(result=json_result({"ok": True, "sshPwd": "hunter2"}))

    with capture_logs() as logs:
        result = await executor.execute(tool, "call-1", {"token": "abc"})

    started, completed = logs
    assert json.loads(started["params"]) == {"token": "***"}
    assert "hunter2" not in completed["result"]
    assert json.loads(only_text(result))["sshPwd"] == "hunter2"


@pytest.mark.asyncio
async def test_unserializable_params_stay_inside_adapter(executor):
    """Test a failure while logging the params still yields an envelope."""
    params = {}
    params["self"] = params
    tool = StubTool(result=text_result("unreached"))

    result = await executor.execute(tool, "call-1", params)

    payload = json.loads(only_text(result))
    assert payload["ok"] is False
    assert "Circular" in payload["error"]
    assert tool.calls == []
