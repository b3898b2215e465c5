"""
Demo window showing a validated sign-up form.

Name, e-mail and nickname are all required; of the two contact fields,
phone and backup e-mail, at least one must be filled in.
"""

import logging

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QFormLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from core.config_manager import ConfigManager
from core.rule_builder import RuleBuilder
from gui.validation import InputValidator, ValidationController, ValidationMode, Validator
from gui.widgets.validated_field import ValidatedField

logger = logging.getLogger(__name__)

EMAIL_PATTERN = r"[^@\s]+@[^@\s]+\.[^@\s]+"
PHONE_PATTERN = r"\+?\d{7,15}"


class MainWindow(QMainWindow):
    """Sign-up form wired to a required-fields Validator and a contact group."""

    def __init__(self, config_manager: ConfigManager | None = None) -> None:
        super().__init__()
        self.config_manager = config_manager or ConfigManager()
        self.values: dict[str, str] = {}

        self.setWindowTitle("Sign up")
        self._setup_ui()
        self._setup_validators()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        central = QWidget()
        layout = QVBoxLayout(central)

        form = QFormLayout()
        self.name_field = ValidatedField("Full name")
        self.name_field.setObjectName("name")
        form.addRow("Name", self.name_field)

        self.email_edit = QLineEdit()
        self.email_edit.setObjectName("email")
        self.email_edit.setPlaceholderText("you@example.com")
        form.addRow("E-mail", self.email_edit)

        self.nickname_field = ValidatedField("Nickname")
        self.nickname_field.setObjectName("nickname")
        form.addRow("Nickname", self.nickname_field)

        self.phone_field = ValidatedField("Phone")
        self.phone_field.setObjectName("phone")
        form.addRow("Phone", self.phone_field)

        self.backup_email_field = ValidatedField("Backup e-mail")
        self.backup_email_field.setObjectName("backup_email")
        form.addRow("Backup e-mail", self.backup_email_field)

        layout.addLayout(form)

        self.submit_button = QPushButton("Submit")
        self.submit_button.clicked.connect(self.submit)
        layout.addWidget(self.submit_button)

        self.status_label = QLabel()
        self.status_label.setAccessibleName("Form status")
        layout.addWidget(self.status_label)

        self.setCentralWidget(central)

    def _setup_validators(self) -> None:
        """Build the rule chains and aggregate validators."""
        config = self.config_manager

        def store(key: str):
            return lambda text: self.values.__setitem__(key, text)

        name = InputValidator(
            RuleBuilder(config).remove_emoji().not_blank("Name is required").max_length(60, "Name is too long").build(),
            store("name"),
            container=self.name_field,
            config=config,
        )
        email = InputValidator(
            RuleBuilder(config)
            .replace(" ")
            .not_blank("E-mail is required")
            .match_regex(EMAIL_PATTERN, "E-mail format is invalid")
            .build(),
            store("email"),
            line_edit=self.email_edit,
            config=config,
        )
        nickname = InputValidator(
            RuleBuilder(config).remove_emoji().min_length(3, "Nickname needs at least 3 characters").build(),
            store("nickname"),
            container=self.nickname_field,
            config=config,
        )
        self.required = Validator(name, email, nickname)

        phone = InputValidator(
            RuleBuilder(config)
            .replace(" ")
            .replace("-")
            .match_regex(PHONE_PATTERN, "Enter a phone number or a backup e-mail")
            .build(),
            store("phone"),
            container=self.phone_field,
            config=config,
        )
        backup_email = InputValidator(
            RuleBuilder(config).match_regex(EMAIL_PATTERN, "Enter a backup e-mail or a phone number").build(),
            store("backup_email"),
            container=self.backup_email_field,
            config=config,
        )
        self.contact = Validator().add([phone, backup_email])

        self.controller = ValidationController(self)
        self.controller.validationCompleted.connect(self._on_required_checked)
        self.controller.validationError.connect(self._on_validation_error)

    def submit(self) -> None:
        """Validate required fields in the background, then the contact group."""
        self.values.clear()
        if not self.controller.start_validation(self.required, ValidationMode.ALL):
            return
        self.submit_button.setEnabled(False)
        self.status_label.setText("Checking...")

    def _on_required_checked(self, required_ok: bool) -> None:
        self.submit_button.setEnabled(True)
        contact_ok = self.contact.is_any_valid()

        if required_ok and contact_ok:
            logger.info(f"Form accepted: {sorted(self.values)}")
            self.status_label.setText("All good!")
        else:
            self.status_label.setText("Please fix the highlighted fields.")

    def _on_validation_error(self, error_type: str, message: str) -> None:
        logger.warning(f"Validation failed to run ({error_type})")
        self.submit_button.setEnabled(True)
        self.status_label.setText(message)

    def closeEvent(self, event: QCloseEvent) -> None:
        """Let a running validation finish before the window goes away."""
        self.controller.wait_for_completion(3000)
        super().closeEvent(event)
