"""
Main Window for the Match Quiz GUI.
"""
from PySide6.QtWidgets import QMainWindow, QLabel, QMessageBox
from PySide6.QtGui import QAction, QKeySequence

from match_quiz import __version__
from match_quiz.engine import RoundEngine
from match_quiz.gui.widgets.board import BoardWidget


class MainWindow(QMainWindow):
    def __init__(self, engine: RoundEngine, schedule=None):
        super().__init__()
        self._engine = engine

        title = engine.source.title or "Match Quiz"
        self.setWindowTitle(f"Match Quiz - {title}")
        self.resize(720, 560)

        # --- Menu Bar ---
        game_menu = self.menuBar().addMenu("Game")
        self.new_round_action = QAction("New Round", self)
        self.new_round_action.setShortcut(QKeySequence.StandardKey.New)
        self.new_round_action.triggered.connect(self._engine.initialize_round)
        game_menu.addAction(self.new_round_action)

        game_menu.addSeparator()
        exit_action = QAction("Quit", self)
        exit_action.triggered.connect(self.close)
        game_menu.addAction(exit_action)

        help_menu = self.menuBar().addMenu("Help")
        about_action = QAction("About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

        # --- Board ---
        self.board = BoardWidget(engine, schedule=schedule, parent=self)
        self.setCentralWidget(self.board)

        # --- Status Bar ---
        self.status_label = QLabel()
        self.statusBar().addPermanentWidget(self.status_label)

        engine.stateChanged.connect(self._update_status)
        engine.roundCleared.connect(self._on_round_cleared)
        self._update_status()

    def _update_status(self) -> None:
        snapshot = self._engine.snapshot()
        self.status_label.setText(
            f"Round {snapshot.generation} | on board: {snapshot.occupied_rows} | "
            f"remaining: {snapshot.pool_size}"
        )

    def _on_round_cleared(self) -> None:
        self.statusBar().showMessage("All pairs matched! Start a new round from the Game menu.")

    def _show_about(self) -> None:
        QMessageBox.about(
            self,
            "About Match Quiz",
            f"Match Quiz {__version__}\n\nPair every question with its answer.",
        )
