"""Tests for wizard.submission -- payload building and submit outcomes.

The coordinator is async; each test drives it with ``asyncio.run``.
"""

import asyncio

import pytest

from wizard.base import StepPreconditionError, SubmissionInFlightError, SubmissionResult
from wizard.state import WizardState
from wizard.submission import SubmissionCoordinator, build_payload

from wizard_fakes import FakeNavigator, FakeNotifier, FakeSubmissionClient


def _setup(values=None, step=2, result=None, error=None):
    state = WizardState(current_step=step)
    if values:
        state.fields.update(values)
    client = FakeSubmissionClient(result=result, error=error)
    client.state = state
    notifier = FakeNotifier()
    navigator = FakeNavigator()
    coordinator = SubmissionCoordinator(state, client, notifier, navigator)
    return state, client, notifier, navigator, coordinator


class TestBuildPayload:
    def test_empty_values_omitted(self):
        values = {
            "title": "T",
            "description": "D" * 20,
            "category": "",
            "budget": "",
            "timeline": "",
            "cooperationType": "其他",
        }
        assert build_payload(values) == {
            "title": "T",
            "description": "D" * 20,
            "cooperationType": "其他",
        }

    def test_none_and_unknown_keys_dropped(self):
        assert build_payload({"title": "Title", "budget": None, "extra": "x"}) == {"title": "Title"}


class TestSubmit:
    def test_scenario_payload(self):
        values = {"title": "T", "description": "D" * 20, "cooperationType": "其他"}
        state, client, *_ , coordinator = _setup(values)
        asyncio.run(coordinator.submit())
        assert client.payloads == [{"title": "T", "description": "D" * 20, "cooperationType": "其他"}]

    def test_success_notifies_and_navigates(self):
        state, client, notifier, navigator, coordinator = _setup({"title": "Title"})
        result = asyncio.run(coordinator.submit())
        assert result.success is True
        assert notifier.calls == [("success", "需求提交成功", "我们将尽快为您匹配合适的企业")]
        assert navigator.destinations == ["/dashboard/demands"]

    def test_semantic_failure(self):
        state, client, notifier, navigator, coordinator = _setup(
            {"title": "Title"}, result=SubmissionResult(success=False, message="duplicate")
        )
        before = state.field_values
        result = asyncio.run(coordinator.submit())
        assert result.message == "duplicate"
        assert notifier.calls == [("failure", "提交失败", "duplicate")]
        assert navigator.destinations == []
        assert state.current_step == 2
        assert state.field_values == before
        assert state.is_submitting is False

    def test_failure_without_message_uses_default(self):
        *_, notifier, _, coordinator = _setup(result=SubmissionResult(success=False))
        asyncio.run(coordinator.submit())
        assert notifier.calls == [("failure", "提交失败", "请稍后重试")]

    def test_raised_error_is_reported(self):
        state, client, notifier, navigator, coordinator = _setup(
            {"title": "Title"}, error=ConnectionError("boom")
        )
        result = asyncio.run(coordinator.submit())
        assert result.success is False
        assert notifier.calls == [("error", "发生错误", "提交需求时发生错误，请稍后重试")]
        assert navigator.destinations == []
        assert state.current_step == 2
        assert state.fields.get("title") == "Title"

    @pytest.mark.parametrize(
        "result,error",
        [
            (SubmissionResult(success=True), None),
            (SubmissionResult(success=False, message="no"), None),
            (None, RuntimeError("down")),
        ],
    )
    def test_flag_raised_during_call_and_reset_after(self, result, error):
        state, client, _, _, coordinator = _setup({"title": "Title"}, result=result, error=error)
        assert state.is_submitting is False
        asyncio.run(coordinator.submit())
        assert client.seen_flags == [True]
        assert state.is_submitting is False

    def test_flag_reset_on_cancellation(self):
        state, client, _, _, coordinator = _setup(error=asyncio.CancelledError())
        with pytest.raises(asyncio.CancelledError):
            asyncio.run(coordinator.submit())
        assert state.is_submitting is False

    def test_second_submit_while_in_flight_rejected(self):
        state, _, _, _, coordinator = _setup({"title": "Title"})
        state.is_submitting = True
        with pytest.raises(SubmissionInFlightError):
            asyncio.run(coordinator.submit())
        assert state.is_submitting is True

    def test_concurrent_submit_rejected(self):
        state = WizardState(current_step=2)
        release = None
        calls = []

        class SlowClient(FakeSubmissionClient):
            async def submit(self, payload):
                calls.append(payload)
                await release.wait()
                return SubmissionResult(success=True)

        coordinator = SubmissionCoordinator(state, SlowClient(), FakeNotifier(), FakeNavigator())

        async def scenario():
            nonlocal release
            release = asyncio.Event()
            first = asyncio.ensure_future(coordinator.submit())
            await asyncio.sleep(0)
            assert state.is_submitting is True
            with pytest.raises(SubmissionInFlightError):
                await coordinator.submit()
            release.set()
            return await first

        result = asyncio.run(scenario())
        assert result.success is True
        assert len(calls) == 1
        assert state.is_submitting is False

    @pytest.mark.parametrize("step", [0, 1])
    def test_only_on_confirmation_step(self, step):
        state, client, *_ , coordinator = _setup({"title": "Title"}, step=step)
        with pytest.raises(StepPreconditionError):
            asyncio.run(coordinator.submit())
        assert client.payloads == []
        assert state.is_submitting is False

    def test_explicit_values(self):
        state, client, *_ , coordinator = _setup({"title": "Stored"})
        asyncio.run(coordinator.submit({"title": "Given", "budget": ""}))
        assert client.payloads == [{"title": "Given"}]


class TestCollaboratorFailures:
    def test_navigator_error_after_success(self):
        state, client, notifier, navigator, coordinator = _setup({"title": "Title"})

        def broken(destination):
            raise RuntimeError("router gone")

        navigator.navigate = broken
        result = asyncio.run(coordinator.submit())
        assert result.success is True
        assert notifier.calls[0][0] == "success"
        assert state.is_submitting is False

    @pytest.mark.parametrize(
        "result,error",
        [
            (SubmissionResult(success=True), None),
            (SubmissionResult(success=False, message="duplicate"), None),
            (None, RuntimeError("down")),
        ],
    )
    def test_notifier_error_does_not_escape(self, result, error):
        state, client, notifier, navigator, coordinator = _setup(
            {"title": "Title"}, result=result, error=error
        )

        def broken(kind, title, detail=""):
            raise RuntimeError("toast failed")

        notifier.notify = broken
        outcome = asyncio.run(coordinator.submit())
        assert outcome.success is (error is None and result.success)
        assert state.is_submitting is False
        if outcome.success:
            assert navigator.destinations == ["/dashboard/demands"]
