"""Tests for WindowGeometryManager attach, restore and observation."""

import gc
import logging

import pytest

from tests.fakes import TITLE_BAR_HEIGHT, FakeHost, FakeWindow, Recorder
from wordgoal.domain import Point, Rect, Size
from wordgoal.window import (
    AttachState,
    DeferredQueue,
    StaticDisplayLayout,
    WindowEvent,
    WindowGeometryManager,
)


def make_manager(
    recorder: Recorder,
    queue: DeferredQueue,
    displays: StaticDisplayLayout,
    initial_size: Size | None = None,
    initial_origin: Point | None = None,
) -> WindowGeometryManager:
    return WindowGeometryManager(
        initial_size=initial_size,
        initial_origin=initial_origin,
        on_size_change=recorder.on_size,
        on_origin_change=recorder.on_origin,
        scheduler=queue,
        displays=displays,
    )


class TestAttach:
    """Tests for the Unattached -> Attached transition."""

    def test_attach_is_deferred(self, recorder, queue, single_display) -> None:
        """Test that attach never connects synchronously."""
        window = FakeWindow()
        host = FakeHost(window)
        manager = make_manager(recorder, queue, single_display)

        manager.attach(host)

        assert manager.state is AttachState.UNATTACHED
        assert host.checks == 0
        assert queue.pending == 1

        queue.run_once()
        assert manager.state is AttachState.ATTACHED
        assert manager.window is window

    def test_retries_once_per_tick_until_window_exists(
        self, recorder, queue, single_display
    ) -> None:
        window = FakeWindow()
        host = FakeHost(window, ready_after=5)
        manager = make_manager(recorder, queue, single_display)

        manager.attach(host)
        for expected_checks in range(1, 6):
            queue.run_once()
            assert host.checks == expected_checks
            assert manager.state is AttachState.UNATTACHED
            assert queue.pending == 1

        queue.run_once()
        assert manager.state is AttachState.ATTACHED
        assert queue.pending == 0
        assert manager.stats.attach_attempts == 6
        assert manager.stats.attach_retries == 5

    def test_reports_baseline_on_attach(self, recorder, queue, single_display) -> None:
        window = FakeWindow(640, 480, 100, 50)
        manager = make_manager(recorder, queue, single_display)

        host = FakeHost(window)
        manager.attach(host)
        queue.run_until_idle()

        assert recorder.events == [("size", (640, 480)), ("origin", (100, 50))]

    def test_retry_stops_when_host_released(self, recorder, queue, single_display) -> None:
        host = FakeHost(None)
        manager = make_manager(recorder, queue, single_display)

        manager.attach(host)
        queue.run_once()
        assert queue.pending == 1

        del host
        gc.collect()
        queue.run_once()
        assert queue.pending == 0
        assert manager.state is AttachState.UNATTACHED

    def test_later_attach_supersedes_pending_check(
        self, recorder, queue, single_display
    ) -> None:
        first = FakeHost(FakeWindow(), ready_after=100)
        second_window = FakeWindow()
        second = FakeHost(second_window)
        manager = make_manager(recorder, queue, single_display)

        manager.attach(first)
        queue.run_once()
        manager.attach(second)
        queue.run_until_idle()

        assert manager.window is second_window
        assert queue.pending == 0


class TestInitialGeometry:
    """Tests for applying persisted size and origin."""

    def test_applies_initial_size_and_clamped_origin(
        self, recorder, queue, single_display
    ) -> None:
        window = FakeWindow(500, 500)
        manager = make_manager(
            recorder,
            queue,
            single_display,
            initial_size=Size(400, 300 - TITLE_BAR_HEIGHT),
            initial_origin=Point(-50, 900),
        )

        host = FakeHost(window)
        manager.attach(host)
        queue.run_until_idle()

        assert window.size_calls == [Size(400, 300 - TITLE_BAR_HEIGHT)]
        # Frame is 400x300 once the content size is applied.
        assert window.origin_calls == [Point(0, 500)]
        assert recorder.origins == [(0, 500)]

    def test_no_initial_geometry_leaves_window_alone(
        self, recorder, queue, single_display
    ) -> None:
        window = FakeWindow(700, 500, 40, 60)
        manager = make_manager(recorder, queue, single_display)

        host = FakeHost(window)
        manager.attach(host)
        queue.run_until_idle()

        assert window.size_calls == []
        assert window.origin_calls == []
        assert recorder.events == [("size", (700, 500)), ("origin", (40, 60))]

    def test_initial_size_applied_only_once(self, recorder, queue, single_display) -> None:
        first = FakeWindow()
        second = FakeWindow()
        host = FakeHost(first)
        manager = make_manager(
            recorder, queue, single_display, initial_size=Size(800, 600)
        )

        manager.attach(host)
        queue.run_until_idle()
        host.mount(second)
        manager.attach(host)
        queue.run_until_idle()

        assert first.size_calls == [Size(800, 600)]
        assert second.size_calls == []
        assert manager.window is second

    def test_origin_reapplied_on_reconnect(self, recorder, queue, single_display) -> None:
        first = FakeWindow()
        second = FakeWindow()
        host = FakeHost(first)
        manager = make_manager(
            recorder, queue, single_display, initial_origin=Point(200, 100)
        )

        manager.attach(host)
        queue.run_until_idle()
        host.mount(second)
        manager.attach(host)
        queue.run_until_idle()

        assert first.origin_calls == [Point(200, 100)]
        assert second.origin_calls == [Point(200, 100)]

    def test_origin_uses_default_rect_without_displays(self, recorder, queue) -> None:
        window = FakeWindow(400, 300 - TITLE_BAR_HEIGHT)
        manager = make_manager(
            recorder, queue, StaticDisplayLayout(), initial_origin=Point(5000, -5000)
        )

        host = FakeHost(window)
        manager.attach(host)
        queue.run_until_idle()

        assert window.origin_calls == [Point(800, 0)]


class TestObservation:
    """Tests for ongoing resize/move reporting."""

    @pytest.fixture
    def attached(self, recorder, queue, single_display):
        window = FakeWindow(600, 400, 10, 20)
        host = FakeHost(window)
        manager = make_manager(recorder, queue, single_display)
        manager.attach(host)
        queue.run_until_idle()
        recorder.events.clear()
        return manager, window, host

    def test_installs_three_observers(self, attached) -> None:
        manager, window, _ = attached
        assert manager.subscription_count == 3
        assert {s.event for s in window.active_subscriptions} == set(WindowEvent)

    def test_reports_in_event_order(self, attached, recorder) -> None:
        _, window, _ = attached

        window.user_resize(700, 500)
        window.user_move(30, 40)
        window.user_resize(720, 510, live=False)

        assert recorder.events == [
            ("size", (700, 500)),
            ("size", (700, 500)),
            ("origin", (30, 40)),
            ("size", (720, 510)),
        ]

    def test_no_debouncing(self, attached, recorder) -> None:
        _, window, _ = attached
        for x in range(10):
            window.user_move(x, 0)
        assert recorder.origins == [(x, 0) for x in range(10)]

    def test_reattach_same_window_is_noop(self, attached, recorder, queue) -> None:
        """Test that re-attaching the same window keeps one set of observers."""
        manager, window, host = attached

        manager.attach(host)
        manager.attach(host)
        queue.run_until_idle()

        assert recorder.events == []
        assert len(window.subscriptions) == 3
        window.emit(WindowEvent.RESIZE)
        assert recorder.events == [("size", (600, 400))]

    def test_attach_different_window_removes_old_observers(
        self, attached, recorder, queue
    ) -> None:
        manager, old_window, host = attached
        new_window = FakeWindow(800, 600, 5, 5)

        host.mount(new_window)
        manager.attach(host)
        queue.run_until_idle()
        recorder.events.clear()

        assert old_window.active_subscriptions == []
        assert len(new_window.active_subscriptions) == 3
        old_window.user_move(99, 99)
        assert recorder.events == []
        new_window.user_move(11, 12)
        assert recorder.events == [("origin", (11, 12))]


class TestTeardown:
    """Tests for detach/close and liveness."""

    def test_context_manager_removes_observers(
        self, recorder, queue, single_display
    ) -> None:
        window = FakeWindow()
        with make_manager(recorder, queue, single_display) as manager:
            host = FakeHost(window)
            manager.attach(host)
            queue.run_until_idle()
            assert len(window.active_subscriptions) == 3

        assert window.active_subscriptions == []
        assert manager.state is AttachState.UNATTACHED

    def test_teardown_on_exception(self, recorder, queue, single_display) -> None:
        window = FakeWindow()
        host = FakeHost(window)
        with pytest.raises(RuntimeError):
            with make_manager(recorder, queue, single_display) as manager:
                manager.attach(host)
                queue.run_until_idle()
                raise RuntimeError("view torn down")

        assert window.active_subscriptions == []

    def test_detach_cancels_pending_attach(self, recorder, queue, single_display) -> None:
        host = FakeHost(FakeWindow(), ready_after=3)
        manager = make_manager(recorder, queue, single_display)

        manager.attach(host)
        queue.run_once()
        manager.detach()
        queue.run_until_idle()

        assert manager.state is AttachState.UNATTACHED
        assert recorder.events == []

    def test_window_released_reads_as_unattached(
        self, recorder, queue, single_display
    ) -> None:
        window = FakeWindow()
        host = FakeHost(window)
        manager = make_manager(recorder, queue, single_display)
        manager.attach(host)
        queue.run_until_idle()

        del host, window
        gc.collect()

        assert manager.window is None
        assert manager.state is AttachState.UNATTACHED

    def test_debug_logging_does_not_retain_window(
        self, recorder, queue, single_display, caplog
    ) -> None:
        window = FakeWindow()
        host = FakeHost(window)
        manager = make_manager(recorder, queue, single_display)
        with caplog.at_level(logging.DEBUG, logger="wordgoal.window.manager"):
            manager.attach(host)
            queue.run_until_idle()

        assert "Attached to window" in caplog.text
        del host, window
        gc.collect()

        assert manager.window is None

    def test_handler_ignores_dead_manager(self, recorder, queue, single_display) -> None:
        window = FakeWindow()
        manager = make_manager(recorder, queue, single_display)
        host = FakeHost(window)
        manager.attach(host)
        queue.run_until_idle()
        handlers = [s.handler for s in window.subscriptions]
        recorder.events.clear()

        del manager
        gc.collect()
        for handler in handlers:
            handler()

        assert recorder.events == []


def test_frame_rect_includes_title_bar() -> None:
    """Sanity check for the fake used above."""
    assert FakeWindow(400, 272).frame() == Rect(0, 0, 400, 300)
