"""Tests for engine.session — the one-run-at-a-time controller."""

from __future__ import annotations

import asyncio
import random

import pytest

from algorithms import REGISTRY, AlgoInfo
from config import settings
from dataset import NegativeValueError
from engine import RunResult, SessionBusyError, SessionController, SessionState, VirtualScheduler
from ui import BarRenderer, ControlPanel, ControlsDisabledError


class ProbeRenderer(BarRenderer):
    """Records controller / control state and delay at every flush."""

    def __init__(self):
        super().__init__()
        self.seen = []
        self.on_flush = None

    def flush(self, delay_ms: int = 0) -> None:
        super().flush(delay_ms)
        self.seen.append(delay_ms)
        if self.on_flush is not None:
            self.on_flush(self)


@pytest.fixture
def controls() -> ControlPanel:
    return ControlPanel(algorithm="bubble", speed=50, size=10)


@pytest.fixture
def controller(controls) -> SessionController:
    return SessionController(
        renderer=ProbeRenderer(),
        scheduler=VirtualScheduler(),
        controls=controls,
        rng=random.Random(3),
    )


# ── dataset lifecycle ───────────────────────────────────────────────


class TestDatasetLifecycle:
    def test_initial_dataset_follows_size_control(self, controller) -> None:
        assert controller.dataset.size == 10
        assert controller.renderer.values == controller.dataset.values

    def test_size_event_regenerates(self, controller, controls) -> None:
        controls.set_size(25)
        assert controller.dataset.size == 25
        assert controller.renderer.size == 25

    def test_new_array_event_regenerates(self, controller, controls) -> None:
        before = controller.dataset
        controls.request_new_array()
        assert controller.dataset is not before
        assert controller.dataset.size == 10

    def test_load_resets_renderer(self, controller) -> None:
        controller.load([3, 2, 1])
        assert controller.renderer.values == [3, 2, 1]
        assert controller.renderer.heights == [9, 6, 3]

    def test_defaults_without_controls(self) -> None:
        ctrl = SessionController(renderer=BarRenderer(), scheduler=VirtualScheduler())
        assert ctrl.dataset.size == settings.DEFAULT_SIZE

    def test_defaults_without_controls_follow_settings(self, monkeypatch) -> None:
        monkeypatch.setattr(settings, "DEFAULT_SIZE", 8)
        monkeypatch.setattr(settings, "DEFAULT_ALGORITHM", "heap")
        monkeypatch.setattr(settings, "DEFAULT_SPEED", 100)
        renderer = ProbeRenderer()
        ctrl = SessionController(renderer=renderer, scheduler=VirtualScheduler())
        assert ctrl.dataset.size == 8

        result = asyncio.run(ctrl.start())
        assert result.algo_key == "heap"
        assert set(renderer.seen) <= {1}


# ── runs ────────────────────────────────────────────────────────────


class TestRun:
    def test_run_sorts_and_reports(self, controller) -> None:
        controller.load([5, 3, 8, 1])
        result = asyncio.run(controller.start("bubble"))

        assert isinstance(result, RunResult)
        assert controller.dataset.values == [1, 3, 5, 8]
        assert result.algo_key == "bubble"
        assert result.size == 4
        assert result.comparisons == 6
        assert result.suspensions == 6
        assert controller.last_result is result
        assert controller.state is SessionState.IDLE

    def test_elapsed_tracks_virtual_delays(self, controller) -> None:
        controller.load([5, 3, 8, 1])
        result = asyncio.run(controller.start("bubble"))
        # six suspensions at 51 ms each
        assert result.elapsed_ms >= 6 * 51
        assert result.elapsed_display == f"{result.elapsed_ms:.2f}"

    def test_uses_selected_algorithm(self, controller, controls) -> None:
        controls.select_algorithm("merge")
        result = asyncio.run(controller.start())
        assert result.algo_key == "merge"
        assert controller.dataset.is_sorted()

    def test_unknown_algorithm_rejected(self, controller) -> None:
        with pytest.raises(ValueError, match="Unknown algorithm"):
            asyncio.run(controller.start("bogo"))
        assert controller.state is SessionState.IDLE

    @pytest.mark.parametrize("key", ["counting", "radix"])
    def test_negative_values_rejected_before_run(self, controller, controls, key) -> None:
        controller.load([3, -1, 2])
        with pytest.raises(NegativeValueError):
            asyncio.run(controller.start(key))
        assert controller.dataset.values == [3, -1, 2]
        assert controller.renderer.flushes == 0
        assert not controls.disabled

    def test_negative_values_fine_for_comparison_sorts(self, controller) -> None:
        controller.load([3, -1, 2])
        asyncio.run(controller.start("quick"))
        assert controller.dataset.values == [-1, 2, 3]

    def test_speed_argument_sets_control(self, controller, controls) -> None:
        controller.load([2, 1])
        asyncio.run(controller.start("bubble", speed=100))
        assert controls.speed == 100
        assert controller.renderer.seen == [1]


# ── one run at a time ───────────────────────────────────────────────


class TestExclusivity:
    def test_controls_disabled_during_run(self, controller, controls) -> None:
        states = []
        controller.renderer.on_flush = lambda r: states.append((controls.disabled, controller.state))
        controller.load([4, 3, 2, 1])

        asyncio.run(controller.start("bubble"))

        assert states
        assert all(s == (True, SessionState.RUNNING) for s in states)
        assert not controls.disabled

    def test_locked_controls_raise_mid_run(self, controller, controls) -> None:
        errors = []

        def poke(_):
            for action in (lambda: controls.set_size(30),
                           controls.request_new_array,
                           lambda: controls.select_algorithm("heap")):
                try:
                    action()
                except ControlsDisabledError as exc:
                    errors.append(exc)

        controller.renderer.on_flush = poke
        controller.load([2, 1])
        asyncio.run(controller.start("bubble"))

        assert len(errors) == 3
        assert controller.dataset.values == [1, 2]
        assert controls.algorithm == "bubble"

    def test_start_refused_while_controls_disabled(self, controller, controls) -> None:
        controls.disable()
        with pytest.raises(SessionBusyError, match="controls are disabled"):
            asyncio.run(controller.start("bubble"))
        assert controller.state is SessionState.IDLE
        assert controller.renderer.flushes == 0

        controls.enable()
        asyncio.run(controller.start("bubble"))
        assert controller.dataset.is_sorted()

    def test_second_start_refused(self, controller) -> None:
        controller.load([5, 4, 3, 2, 1])

        async def scenario():
            first = asyncio.ensure_future(controller.start("bubble"))
            await asyncio.sleep(0)
            assert controller.is_running
            with pytest.raises(SessionBusyError):
                await controller.start("merge")
            with pytest.raises(SessionBusyError):
                controller.regenerate()
            return await first

        result = asyncio.run(scenario())
        assert result.algo_key == "bubble"
        assert controller.dataset.values == [1, 2, 3, 4, 5]

    def test_speed_stays_live(self, controller, controls) -> None:
        def speed_up(renderer):
            if len(renderer.seen) == 1:
                controls.set_speed(100)

        controller.renderer.on_flush = speed_up
        controller.load([4, 3, 2, 1])
        asyncio.run(controller.start("bubble"))

        assert controller.renderer.seen[0] == 51
        assert set(controller.renderer.seen[1:]) == {1}

    def test_controls_re_enabled_after_failure(self, controller, controls, monkeypatch) -> None:
        async def explode(ctx):
            await ctx.pause()
            raise RuntimeError("boom")

        monkeypatch.setitem(REGISTRY, "explode", AlgoInfo(
            key="explode", label="Explode", fn=explode, pseudocode=[],
        ))

        with pytest.raises(RuntimeError, match="boom"):
            asyncio.run(controller.start("explode"))

        assert not controls.disabled
        assert controller.state is SessionState.IDLE
        # a fresh run is possible again
        asyncio.run(controller.start("bubble"))
