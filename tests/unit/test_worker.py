"""
Tests for background validation.
"""

from unittest.mock import Mock

from core.error_handler import get_error_handler
from core.rules import NotBlank
from gui.validation.input_validator import InputValidator
from gui.validation.validator import Validator
from gui.validation.worker import ValidationController, ValidationMode, ValidationWorker


def _group(line_edit, field):
    email = InputValidator([NotBlank("Email required")], Mock(), container=field)
    username = InputValidator([NotBlank("Username required")], Mock(), line_edit=line_edit)
    return Validator(username, email)


class TestValidationWorker:
    """Test the ValidationWorker QThread."""

    def test_default_mode(self) -> None:
        worker = ValidationWorker(Validator())
        assert worker.mode is ValidationMode.ALL

    def test_all_mode_result_and_display(self, qtbot, line_edit, field) -> None:
        line_edit.setText("alice")
        worker = ValidationWorker(_group(line_edit, field), ValidationMode.ALL)

        with qtbot.waitSignal(worker.validationCompleted, timeout=3000) as blocker:
            worker.start()
        worker.wait()

        assert blocker.args == [False]
        qtbot.waitUntil(lambda: field.error() == "Email required", timeout=1000)

    def test_any_mode_passes_with_one_valid(self, qtbot, line_edit, field) -> None:
        field.set_text("me@example.com")
        worker = ValidationWorker(_group(line_edit, field), ValidationMode.ANY)

        with qtbot.waitSignal(worker.validationCompleted, timeout=3000) as blocker:
            worker.start()
        worker.wait()

        assert blocker.args == [True]

    def test_configuration_error_is_reported(self, qtbot) -> None:
        worker = ValidationWorker(Validator())

        with qtbot.waitSignal(worker.validationError, timeout=3000) as blocker:
            worker.start()
        worker.wait()

        assert blocker.args[0] == "NoValidatorsConfiguredError"
        assert blocker.args[1] == "There's no InputValidator added"

    def test_callback_exception_is_reported(self, qtbot, line_edit) -> None:
        line_edit.setText("alice")
        failing = Mock(side_effect=RuntimeError("callback broke"))
        worker = ValidationWorker(Validator(InputValidator([NotBlank("Required")], failing, line_edit=line_edit)))

        with qtbot.waitSignal(worker.validationError, timeout=3000) as blocker:
            worker.start()
        worker.wait()

        assert blocker.args == ["RuntimeError", "callback broke"]

    def test_errors_go_through_error_handler(self, qtbot) -> None:
        worker = ValidationWorker(Validator(), ValidationMode.ANY)

        with qtbot.waitSignal(get_error_handler().errorOccurred, timeout=3000) as blocker:
            worker.start()
        worker.wait()

        app_error = blocker.args[0]
        assert app_error.code.value == "NO_VALIDATORS_CONFIGURED"
        assert app_error.context["mode"] == "any"


class TestValidationController:
    """Test the worker lifecycle manager."""

    def test_runs_and_cleans_up(self, qtbot, line_edit, field) -> None:
        line_edit.setText("alice")
        field.set_text("me@example.com")
        controller = ValidationController()

        with qtbot.waitSignals([controller.validationCompleted, controller.validationFinished], timeout=3000):
            assert controller.start_validation(_group(line_edit, field)) is True

        assert controller.current_worker is None
        assert not controller.is_running()

    def test_refreshes_text_before_running(self, qtbot, line_edit, field) -> None:
        field.set_text("me@example.com")
        line_edit.blockSignals(True)
        line_edit.setText("alice")
        line_edit.blockSignals(False)
        controller = ValidationController()

        with qtbot.waitSignal(controller.validationCompleted, timeout=3000) as blocker:
            controller.start_validation(_group(line_edit, field))

        assert blocker.args == [True]
        qtbot.waitUntil(lambda: controller.current_worker is None, timeout=3000)
        assert line_edit.property("hasError") is False

    def test_rejects_concurrent_start(self, qtbot, line_edit, field) -> None:
        controller = ValidationController()
        group = _group(line_edit, field)

        with qtbot.waitSignal(controller.validationFinished, timeout=3000):
            assert controller.start_validation(group) is True
            assert controller.start_validation(group) is False

    def test_forwards_errors(self, qtbot) -> None:
        controller = ValidationController()

        with qtbot.waitSignal(controller.validationError, timeout=3000) as blocker:
            controller.start_validation(Validator(), ValidationMode.ANY)

        assert blocker.args[0] == "NoValidatorsConfiguredError"
        qtbot.waitUntil(lambda: controller.current_worker is None, timeout=3000)

    def test_wait_without_worker(self) -> None:
        assert ValidationController().wait_for_completion() is True
