"""Tests for controller state models."""

from __future__ import annotations

import pytest

from pycarcontrol.models.controllers import BoolController, ModeController, RangeController


class TestBoolController:
    def test_defaults_off(self) -> None:
        assert BoolController().value is False

    def test_turn_on_off(self) -> None:
        controller = BoolController()
        controller.turn_on()
        assert controller.value is True
        controller.turn_off()
        assert controller.value is False


class TestModeController:
    def test_add_mode_keeps_order_and_uniqueness(self) -> None:
        controller = ModeController()
        for mode in ("RED", "BLUE", "RED", "GREEN"):
            controller.add_mode(mode)
        assert controller.modes == ["RED", "BLUE", "GREEN"]
        assert controller.value == "RED"

    def test_constructor_dedupes(self) -> None:
        controller = ModeController(modes=["LOW", "HIGH", "LOW"])
        assert controller.modes == ["LOW", "HIGH"]

    def test_set_mode(self) -> None:
        controller = ModeController(modes=["ECONOMY", "AUTO"])
        controller.set_mode("AUTO")
        assert controller.value == "AUTO"
        assert controller.has_mode("ECONOMY")
        with pytest.raises(ValueError):
            controller.set_mode("TURBO")

    def test_initial_value_must_be_supported(self) -> None:
        with pytest.raises(ValueError):
            ModeController(modes=["LOW"], value="HIGH")

    def test_adjust_mode_clamps(self) -> None:
        controller = ModeController(modes=["LOW", "MEDIUM", "HIGH"], ordered=True)
        assert controller.adjust_mode(1) == "MEDIUM"
        assert controller.adjust_mode(5) == "HIGH"
        assert controller.adjust_mode(-10) == "LOW"

    def test_adjust_mode_requires_ordered(self) -> None:
        controller = ModeController(modes=["BODY", "FLOOR"])
        with pytest.raises(ValueError):
            controller.adjust_mode(1)


class TestRangeController:
    def test_defaults_to_minimum(self) -> None:
        controller = RangeController(minimum=60, maximum=90)
        assert controller.value == 60
        assert controller.step is None
        assert controller.unit is None

    def test_rejects_inverted_bounds(self) -> None:
        with pytest.raises(ValueError):
            RangeController(minimum=90, maximum=60)

    def test_rejects_non_positive_step(self) -> None:
        with pytest.raises(ValueError):
            RangeController(minimum=0, maximum=10, step=0)

    def test_set_value(self) -> None:
        controller = RangeController(minimum=1, maximum=10, step=1)
        controller.set_value(5)
        assert controller.value == 5
        assert controller.contains(10)
        assert not controller.contains(11)
        with pytest.raises(ValueError):
            controller.set_value(0)

    def test_adjust_value_clamps(self) -> None:
        controller = RangeController(minimum=0, maximum=100, value=95)
        assert controller.adjust_value(10) == 100
        assert controller.adjust_value(-30) == 70
        assert controller.adjust_value(-100) == 0


class TestAssignmentValidation:
    def test_range_value_assignment_is_checked(self) -> None:
        controller = RangeController(minimum=60, maximum=90)
        with pytest.raises(ValueError):
            controller.value = 1000
        assert controller.value == 60
        controller.value = 72
        assert controller.value == 72

    def test_range_bounds_assignment_is_checked(self) -> None:
        controller = RangeController(minimum=60, maximum=90, value=80)
        with pytest.raises(ValueError):
            controller.maximum = 50
        with pytest.raises(ValueError):
            controller.minimum = 85
        assert (controller.minimum, controller.maximum) == (60, 90)

    def test_mode_value_assignment_is_checked(self) -> None:
        controller = ModeController(modes=["ECONOMY", "AUTO"])
        with pytest.raises(ValueError):
            controller.value = "TURBO"
        assert controller.value == "ECONOMY"

    def test_add_mode_then_set(self) -> None:
        controller = ModeController()
        controller.add_mode("BODY")
        controller.add_mode("FLOOR")
        controller.set_mode("FLOOR")
        assert controller.value == "FLOOR"
