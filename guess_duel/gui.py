from __future__ import annotations

import logging
import random
import sys

try:
    from PySide6.QtCore import Qt, QTimer
    from PySide6.QtWidgets import (
        QApplication,
        QFrame,
        QHBoxLayout,
        QLabel,
        QLineEdit,
        QMainWindow,
        QPlainTextEdit,
        QProgressBar,
        QPushButton,
        QVBoxLayout,
        QWidget,
    )
except ModuleNotFoundError as exc:  # pragma: no cover
    raise SystemExit(
        "PySide6 is not installed. Install it with: "
        "python3 -m pip install PySide6"
    ) from exc

from guess_duel.models import GameSnapshot, GuessOutcome
from guess_duel.modules.game_controller import GameController

POPUP_MS = 900

HEALTH_BAR_STYLE = (
    "QProgressBar {{ border: 1px solid #2d3a50; border-radius: 4px; text-align: center; }}"
    "QProgressBar::chunk {{ background-color: {color}; }}"
)


class CombatantPanel(QFrame):
    def __init__(self, name: str, bar_color: str, max_health: int) -> None:
        super().__init__()
        self.setFrameShape(QFrame.Shape.StyledPanel)
        layout = QVBoxLayout(self)
        layout.setSpacing(8)

        self.name_label = QLabel(name)
        self.name_label.setStyleSheet("font-size: 18px; font-weight: 700;")
        self.pose_label = QLabel("Ready")
        self.pose_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.pose_label.setStyleSheet("font-size: 15px; color: #4f5d75;")

        self.health_bar = QProgressBar()
        self.health_bar.setRange(0, max_health)
        self.health_bar.setValue(max_health)
        self.health_bar.setFormat("%v HP")
        self.health_bar.setStyleSheet(HEALTH_BAR_STYLE.format(color=bar_color))

        self.popup_label = QLabel("")
        self.popup_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.popup_label.setMinimumHeight(24)
        self.popup_timer = QTimer(self)
        self.popup_timer.setSingleShot(True)
        self.popup_timer.setInterval(POPUP_MS)
        self.popup_timer.timeout.connect(self.clear_popup)

        layout.addWidget(self.name_label)
        layout.addWidget(self.pose_label)
        layout.addWidget(self.health_bar)
        layout.addWidget(self.popup_label)

    def set_health(self, health: float) -> None:
        self.health_bar.setValue(int(round(health)))

    def set_pose(self, pose: str) -> None:
        self.pose_label.setText(pose)

    def show_popup(self, text: str, color: str) -> None:
        self.popup_label.setText(text)
        self.popup_label.setStyleSheet(f"font-size: 16px; font-weight: 700; color: {color};")
        self.popup_timer.start()

    def clear_popup(self) -> None:
        self.popup_label.setText("")


class GuessDuelWindow(QMainWindow):
    def __init__(self, controller: GameController | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Guess Duel")
        self.resize(720, 560)

        self.controller = controller or GameController(rng=random.Random())
        self.rules = self.controller.rules
        self._game_number = 0
        self.setCentralWidget(self._build_page())

        self._refresh(self.controller.get_snapshot())
        self._append_log(f"New game! Range: 1-{self.controller.state.session.enemy_range}")

    def _build_page(self) -> QWidget:
        page = QWidget()
        root = QVBoxLayout(page)
        root.setContentsMargins(24, 18, 24, 18)
        root.setSpacing(14)

        title = QLabel("Guess Duel")
        title.setStyleSheet("font-size: 26px; font-weight: 700;")
        root.addWidget(title)

        arena = QHBoxLayout()
        arena.setSpacing(12)
        self.player_panel = CombatantPanel("You", "#3fa34d", self.rules.max_health)
        self.enemy_panel = CombatantPanel("Enemy", "#c0392b", self.rules.max_health)
        arena.addWidget(self.player_panel, 1)
        arena.addWidget(self.enemy_panel, 1)
        root.addLayout(arena)

        self.range_label = QLabel("")
        self.range_label.setStyleSheet("font-size: 15px; color: #2d3a50;")
        self.score_label = QLabel("")
        self.score_label.setStyleSheet("font-size: 15px; color: #2d3a50;")
        root.addWidget(self.range_label)
        root.addWidget(self.score_label)

        input_row = QHBoxLayout()
        input_row.setSpacing(8)
        self.guess_input = QLineEdit()
        self.guess_input.setPlaceholderText("Your guess")
        self.guess_input.returnPressed.connect(self._submit_guess)
        self.guess_button = QPushButton("Guess")
        self.guess_button.clicked.connect(self._submit_guess)
        self.reset_button = QPushButton("Reset")
        self.reset_button.clicked.connect(self._reset_game)

        for button in (self.guess_button, self.reset_button):
            button.setMinimumHeight(40)
        input_row.addWidget(self.guess_input, 1)
        input_row.addWidget(self.guess_button)
        input_row.addWidget(self.reset_button)
        root.addLayout(input_row)

        self.event_log = QPlainTextEdit()
        self.event_log.setReadOnly(True)
        self.event_log.setMaximumBlockCount(500)
        self.event_log.setPlaceholderText("Battle log")
        root.addWidget(self.event_log, 1)

        return page

    def _append_log(self, message: str) -> None:
        self.event_log.appendPlainText(message)

    def _set_input_enabled(self, enabled: bool) -> None:
        self.guess_input.setEnabled(enabled)
        self.guess_button.setEnabled(enabled and not self.controller.is_game_over)

    def _refresh(self, snapshot: GameSnapshot) -> None:
        self.player_panel.set_health(snapshot.player_health)
        self.enemy_panel.set_health(snapshot.enemy_health)
        self.range_label.setText(f"Current range: 1-{snapshot.range}")
        self.score_label.setText(f"Score: {snapshot.score} | High: {snapshot.high_score}")

    def _submit_guess(self) -> None:
        if not self.guess_button.isEnabled():
            return

        outcome = self.controller.submit_guess(self.guess_input.text())
        self.guess_input.clear()

        if not outcome.accepted:
            for event in outcome.events:
                self._append_log(event)
            return

        if outcome.hit:
            self._show_hit(outcome)
        else:
            self._show_miss(outcome)

        if outcome.player_dead:
            self.player_panel.set_pose("Knocked out")
            self.guess_button.setEnabled(False)

    def _show_miss(self, outcome: GuessOutcome) -> None:
        self.player_panel.show_popup(f"-{self.rules.miss_damage} HP", "red")
        for event in outcome.events:
            self._append_log(event)
        self._refresh(self.controller.get_snapshot())

    def _show_hit(self, outcome: GuessOutcome) -> None:
        self.player_panel.set_pose("Attacking!")
        self.enemy_panel.show_popup(f"-{self.rules.hit_damage} HP", "orange")
        self._append_log(outcome.events[0])

        if not outcome.enemy_defeated:
            self._refresh(self.controller.get_snapshot())
            self.player_panel.set_pose("Ready")
            return

        # Let the hit land on screen before the defeat consequences appear.
        self._set_input_enabled(False)
        self.enemy_panel.set_health(0)
        delay_ms = int(self.rules.defeat_pause_seconds * 1000)
        game_number = self._game_number
        QTimer.singleShot(delay_ms, lambda: self._finish_defeat(outcome, game_number))

    def _finish_defeat(self, outcome: GuessOutcome, game_number: int) -> None:
        if game_number != self._game_number:
            return
        self.player_panel.set_pose("Ready")
        self.player_panel.show_popup(f"+{self.rules.defeat_heal} HP", "lime")
        for event in outcome.events[1:]:
            self._append_log(event)
        self._refresh(self.controller.get_snapshot())
        self._set_input_enabled(True)

    def _reset_game(self) -> None:
        self._game_number += 1
        snapshot = self.controller.reset_game()
        self.event_log.clear()
        for event in snapshot.events:
            self._append_log(event)
        self.player_panel.set_pose("Ready")
        self._refresh(self.controller.get_snapshot())
        self._set_input_enabled(True)
        self.guess_input.setFocus()


def run_gui() -> int:
    logging.basicConfig(level=logging.INFO)
    app = QApplication(sys.argv)
    window = GuessDuelWindow()
    window.show()
    return app.exec()


def main() -> None:
    raise SystemExit(run_gui())


if __name__ == "__main__":
    main()
