from __future__ import annotations

from typing import Dict, List, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QAbstractItemView,
    QFrame,
    QHBoxLayout,
    QInputDialog,
    QLabel,
    QLineEdit,
    QListWidget,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from monster_tracker.core.config import DEFAULT_CONFIG, TrackerConfig
from monster_tracker.core.controller import MonsterController


class SignalBlocker:
    """Context manager to temporarily suppress widget signals."""

    def __init__(self, widget) -> None:
        self._widget = widget
        self._previous = False

    def __enter__(self):
        self._previous = self._widget.blockSignals(True)
        return self

    def __exit__(self, exc_type, exc, tb):
        self._widget.blockSignals(self._previous)
        return False


class QtDialogService:
    """Modal dialogs backed by QMessageBox and QInputDialog."""

    def __init__(self, parent: QWidget) -> None:
        self._parent = parent

    def show_validation_error(self, message: str) -> None:
        QMessageBox.warning(self._parent, self._parent.windowTitle(), message)

    def confirm(self, title: str, question: str) -> bool:
        answer = QMessageBox.question(
            self._parent,
            title,
            question,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        return answer == QMessageBox.StandardButton.Yes

    def prompt_text(self, title: str, label: str) -> Optional[str]:
        text, accepted = QInputDialog.getText(self._parent, title, label)
        if not accepted:
            return None
        return text


class MainWindow(QMainWindow):
    def __init__(
        self,
        controller: MonsterController,
        config: Optional[TrackerConfig] = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        self.config = config or DEFAULT_CONFIG
        if controller.dialogs is None:
            controller.set_dialogs(QtDialogService(self))

        window_cfg = self.config.window
        self.setWindowTitle(window_cfg.title)
        self.resize(*window_cfg.to_tuple())
        if not window_cfg.resizable:
            self.setFixedSize(*window_cfg.to_tuple())

        self._build_menu()
        self._build_ui()
        self._connect_signals()
        self._render_list(controller.store.lines())
        self._on_actions_enabled_changed(controller.actions_enabled)

    def _build_menu(self) -> None:
        file_menu = self.menuBar().addMenu("&File")
        exit_action = file_menu.addAction("E&xit")
        exit_action.triggered.connect(self.close)

    def _build_ui(self) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(10, 10, 10, 10)

        create_row = QHBoxLayout()
        self.name_field = QLineEdit()
        self.life_field = QLineEdit()
        self.life_field.setMaximumWidth(60)
        self.create_button = QPushButton("Create monster")
        create_row.addWidget(QLabel("Name:"))
        create_row.addWidget(self.name_field)
        create_row.addWidget(QLabel("Life:"))
        create_row.addWidget(self.life_field)
        create_row.addWidget(self.create_button)
        layout.addLayout(create_row)

        self.monster_list = QListWidget()
        self.monster_list.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        row_height = self.monster_list.fontMetrics().height() + 4
        self.monster_list.setMinimumHeight(row_height * self.config.list.visible_rows)
        layout.addWidget(self.monster_list, stretch=2)

        control_row = QHBoxLayout()
        self.amount_field = QLineEdit()
        self.amount_field.setMaximumWidth(60)
        self.apply_button = QPushButton("Apply")
        self.remove_button = QPushButton("Remove")
        self.clone_button = QPushButton("Clone")
        self.clear_button = QPushButton("\U0001F5D1\uFE0F")
        self.clear_button.setToolTip("Remove all monsters")
        control_row.addWidget(QLabel("Value:"))
        control_row.addWidget(self.amount_field)
        control_row.addWidget(self.apply_button)
        control_row.addWidget(self.remove_button)
        control_row.addWidget(self.clone_button)
        control_row.addWidget(self.clear_button)
        layout.addLayout(control_row)

        self.status_label = QLabel(" ")
        self.status_label.setObjectName("statusLabel")
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.status_label.setFrameShape(QFrame.Shape.Box)
        self.status_label.setMinimumHeight(30)
        layout.addWidget(self.status_label)

        self.log_output = QTextEdit()
        self.log_output.setReadOnly(True)
        self.log_output.document().setMaximumBlockCount(self.config.log.max_lines)
        self._log_title = QLabel("Event log")
        layout.addWidget(self._log_title)
        layout.addWidget(self.log_output, stretch=1)
        self._log_title.setVisible(self.config.log.show_event_log)
        self.log_output.setVisible(self.config.log.show_event_log)

        self.setCentralWidget(central)
        self.statusBar().showMessage("Ready")

    def _connect_signals(self) -> None:
        self._field_widgets: Dict[str, QLineEdit] = {
            "name": self.name_field,
            "life": self.life_field,
            "amount": self.amount_field,
        }
        for name, widget in self._field_widgets.items():
            widget.textChanged.connect(lambda text, name=name: self.controller.set_field(name, text))

        self.create_button.clicked.connect(self.controller.create)
        self.apply_button.clicked.connect(self.controller.apply)
        self.remove_button.clicked.connect(self.controller.remove)
        self.clear_button.clicked.connect(self.controller.clear_list)
        self.clone_button.clicked.connect(self.controller.clone)
        self.monster_list.itemSelectionChanged.connect(self._on_item_selection_changed)

        self.controller.store_changed.connect(self._render_list)
        self.controller.selection_changed.connect(self._on_selection_changed)
        self.controller.actions_enabled_changed.connect(self._on_actions_enabled_changed)
        self.controller.status_changed.connect(self._on_status_changed)
        self.controller.form_reset.connect(self._on_form_reset)
        self.controller.log_emitted.connect(self._append_log)

    def _on_item_selection_changed(self) -> None:
        if not self.monster_list.selectedItems():
            self.controller.clear_selection()
        else:
            self.controller.select(self.monster_list.currentRow())

    def _render_list(self, lines: List[str]) -> None:
        with SignalBlocker(self.monster_list):
            self.monster_list.clear()
            self.monster_list.addItems(lines)
            self._apply_selection(self.controller.selection)

    def _on_selection_changed(self, index: Optional[int]) -> None:
        with SignalBlocker(self.monster_list):
            self._apply_selection(index)

    def _apply_selection(self, index: Optional[int]) -> None:
        if index is None:
            self.monster_list.clearSelection()
            self.monster_list.setCurrentRow(-1)
        else:
            self.monster_list.setCurrentRow(index)

    def _on_actions_enabled_changed(self, enabled: bool) -> None:
        self.apply_button.setEnabled(enabled)
        self.remove_button.setEnabled(enabled)
        self.clone_button.setEnabled(enabled)

    def _on_status_changed(self, text: str) -> None:
        self.status_label.setText(text or " ")
        self.statusBar().showMessage(text, 5000)

    def _on_form_reset(self, names: List[str]) -> None:
        for name in names:
            widget = self._field_widgets.get(name)
            if widget is not None:
                with SignalBlocker(widget):
                    widget.clear()

    def _append_log(self, message: str) -> None:
        self.log_output.append(message)
