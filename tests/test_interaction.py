"""Tests for hover highlighting and the detail payload."""

import pytest

from emotionmap.model.points import Point, PointStore
from emotionmap.scene.interaction import DetailPayload, InteractionController, format_detail
from emotionmap.scene.palette import (
    DEFAULT_OPACITY, DEFAULT_RADIUS, HIGHLIGHT_OPACITY, HIGHLIGHT_RADIUS, TRANSITION_MS, Quadrant,
)
from emotionmap.scene.reconciler import SceneReconciler

EXCITED = ("兴奋", "快乐", "高")
ECSTATIC = ("狂喜", "快乐", "高")
LOST = ("失落", "悲伤", "低")


@pytest.fixture
def scene(groups, surface):
    points = PointStore(groups).points
    reconciler = SceneReconciler()
    reconciler.reconcile((), points, surface)
    surface.reset_log()
    return points, reconciler, InteractionController(reconciler, surface)


class TestHover:
    """Highlight transitions."""

    def test_hover_enlarges(self, scene, surface):
        _, _, controller = scene
        command = controller.on_hover(EXCITED)
        assert command.enlarge == EXCITED
        assert command.restore is None
        assert command.detail.word == "兴奋"
        assert controller.enlarged == EXCITED
        marker = surface.marker_for(EXCITED)
        assert marker["radius"] == HIGHLIGHT_RADIUS
        assert marker["opacity"] == HIGHLIGHT_OPACITY
        assert surface.updates == [(EXCITED, HIGHLIGHT_RADIUS, HIGHLIGHT_OPACITY, TRANSITION_MS)]

    def test_hover_other_restores_previous_first(self, scene, surface):
        _, _, controller = scene
        controller.on_hover(EXCITED)
        surface.reset_log()
        command = controller.on_hover(LOST)
        assert command.restore == EXCITED
        assert command.enlarge == LOST
        assert [u[0] for u in surface.updates] == [EXCITED, LOST]
        assert surface.marker_for(EXCITED)["radius"] == DEFAULT_RADIUS
        assert surface.marker_for(EXCITED)["opacity"] == DEFAULT_OPACITY
        assert surface.marker_for(LOST)["radius"] == HIGHLIGHT_RADIUS

    def test_hover_same_marker_is_noop(self, scene, surface):
        _, _, controller = scene
        controller.on_hover(EXCITED)
        surface.reset_log()
        assert controller.on_hover(EXCITED).is_noop
        assert surface.updates == []

    def test_hover_unknown_marker_is_noop(self, scene):
        _, _, controller = scene
        assert controller.on_hover(("x", "y", "z")).is_noop
        assert controller.enlarged is None

    def test_unhover_restores_and_clears(self, scene, surface):
        _, _, controller = scene
        controller.on_hover(EXCITED)
        command = controller.on_unhover(EXCITED)
        assert command.restore == EXCITED
        assert command.clear_detail
        assert controller.enlarged is None
        assert controller.detail is None
        assert surface.marker_for(EXCITED)["radius"] == DEFAULT_RADIUS

    def test_unhover_other_marker_is_noop(self, scene):
        _, _, controller = scene
        controller.on_hover(EXCITED)
        assert controller.on_unhover(ECSTATIC).is_noop
        assert controller.enlarged == EXCITED

    def test_at_most_one_enlarged(self, scene, surface):
        _, _, controller = scene
        for key in (EXCITED, ECSTATIC, LOST, EXCITED):
            controller.on_hover(key)
        enlarged = [m["key"] for m in surface.markers.values() if m["radius"] == HIGHLIGHT_RADIUS]
        assert enlarged == [EXCITED]


class TestSceneChanges:

    def test_sync_after_removal(self, scene, surface):
        points, reconciler, controller = scene
        controller.on_hover(LOST)
        reconciler.reconcile(points, tuple(p for p in points if p.category == "快乐"), surface)
        command = controller.sync()
        assert command.clear_detail
        assert controller.enlarged is None

    def test_sync_when_still_drawn(self, scene):
        _, _, controller = scene
        controller.on_hover(EXCITED)
        assert controller.sync().is_noop
        assert controller.enlarged == EXCITED

    def test_reset(self, scene, surface):
        _, _, controller = scene
        controller.on_hover(EXCITED)
        surface.reset_log()
        controller.reset()
        assert controller.enlarged is None
        assert surface.updates == []


class TestDetailPayload:

    @pytest.mark.parametrize("coord, valence, arousal, quadrant", [
        ((0.8, 0.9), "positive", "high", Quadrant.HIGH_VALENCE_HIGH_AROUSAL),
        ((-0.6, -0.5), "negative", "low", Quadrant.LOW_VALENCE_LOW_AROUSAL),
        ((-0.3, 0.4), "negative", "high", Quadrant.LOW_VALENCE_HIGH_AROUSAL),
        ((0.6, -0.2), "positive", "low", Quadrant.HIGH_VALENCE_LOW_AROUSAL),
        ((0.0, 0.0), "negative", "low", Quadrant.LOW_VALENCE_LOW_AROUSAL),
    ])
    def test_signs_and_quadrant(self, coord, valence, arousal, quadrant):
        payload = DetailPayload.from_point(Point("w", "c", "l", coord))
        assert payload.valence_sign == valence
        assert payload.arousal_sign == arousal
        assert payload.quadrant is quadrant

    def test_format_detail(self):
        payload = DetailPayload.from_point(Point("兴奋", "快乐", "高", (0.8, 0.9)))
        text = format_detail(payload)
        assert text.splitlines() == [
            "兴奋",
            "类别: 快乐",
            "强度: 高",
            "坐标: [0.80, 0.90]",
            "愉悦度: 正面",
            "唤醒度: 高唤醒",
            "象限: 高愉悦/高唤醒",
        ]
