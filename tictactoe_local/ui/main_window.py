import logging

from ..game_logic import GameSession, StatusKind
from ..ui.board_widget import BoardWidget
from . import theme

from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QGroupBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Tic Tac Toe"

HOW_TO_PLAY = (
    "Two players take turns. Player X starts.",
    "Click an empty square to place your mark.",
    "Get three of your marks in a row (horizontal, vertical, or diagonal) to win.",
    "If all squares are filled and no one wins, it's a draw.",
    "Use Reset to clear the board; Restart behaves the same for this local game.",
)


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, theme_name=theme.LIGHT):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.session = GameSession()
        self.board_widget = BoardWidget(self.session, parent=self)
        self.theme_name = theme_name
        self._message_style = None        # last status style key

        self._setup_ui()
        self._apply_theme()
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_header()              # title + theme toggle
        self.main_layout.addWidget(self.header_widget)

        self.status_label = QLabel("")
        f = QFont(); f.setPointSize(14); self.status_label.setFont(f)
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setAccessibleName("Game status")
        self.main_layout.addWidget(self.status_label)

        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # reset + restart buttons
        self.main_layout.addWidget(self.controls_bottom_widget)
        self._create_how_to_play()
        self.main_layout.addWidget(self.how_to_play_group)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.restart_game)
        theme_action = QAction("Toggle Theme", self)
        theme_action.triggered.connect(self.toggle_theme)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (new_action, theme_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_header(self):
        # title on the left, theme toggle on the right
        self.header_widget = QWidget()
        hl = QHBoxLayout(self.header_widget)
        self.title_label = QLabel(WINDOW_TITLE)
        f = QFont(); f.setPointSize(20); f.setBold(True); self.title_label.setFont(f)
        self.title_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.theme_button = QPushButton("")
        self.theme_button.clicked.connect(self.toggle_theme)
        hl.addWidget(self.title_label); hl.addWidget(self.theme_button)

    def _create_bottom_controls(self):
        # reset/restart buttons, same action for a local game
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.reset_button = QPushButton("Reset Board")
        self.reset_button.setAccessibleName("Reset Board")
        self.reset_button.clicked.connect(self.reset_board)
        self.restart_button = QPushButton("Restart Game")
        self.restart_button.setAccessibleName("Restart Game")
        self.restart_button.clicked.connect(self.restart_game)
        hl.addStretch(1); hl.addWidget(self.reset_button); hl.addWidget(self.restart_button)

    def _create_how_to_play(self):
        self.how_to_play_group = QGroupBox("How to Play")
        layout = QVBoxLayout()
        for line in HOW_TO_PLAY:
            label = QLabel(f"• {line}"); label.setWordWrap(True)
            layout.addWidget(label)
        self.how_to_play_group.setLayout(layout)

    def _update_message(self, text, style=None):
        # set message text + style
        self._message_style = style
        self.status_label.setStyleSheet(theme.status_style(self.theme_name, style))
        self.status_label.setText(text)

    def _refresh(self):
        """
        redraw the board and show the session status
        """
        status = self.session.get_status()
        if status.kind is StatusKind.WON:
            self._update_message(status.label, "win")
        elif status.kind is StatusKind.DRAWN:
            self._update_message(status.label, "draw")
        else:
            self._update_message(status.label, "turn")
        # finished games take no more clicks
        self.board_widget.set_accept_clicks(status.kind is StatusKind.ONGOING)
        self.board_widget.refresh()

    def _apply_theme(self):
        app = QApplication.instance()
        if app is not None:
            theme.apply_theme(app, self.theme_name)
        self.board_widget.set_theme(self.theme_name)
        self.theme_button.setText(theme.toggle_label(self.theme_name))
        self.theme_button.setToolTip(theme.toggle_tooltip(self.theme_name))
        self.theme_button.setAccessibleName(theme.toggle_tooltip(self.theme_name))
        # restyle the current message for the new background
        self.status_label.setStyleSheet(theme.status_style(self.theme_name, self._message_style))

    @Slot()
    def toggle_theme(self):
        self.theme_name = theme.other_theme(self.theme_name)
        self._apply_theme()

    @Slot(int)
    def _on_cell_clicked(self, index):
        if self.session.place_mark(index) is None:
            if self.session.is_game_over:
                self._update_message("Game over. Restart to play again.", "error")
            else:
                self._update_message(f"Cell {index + 1} is taken.", "error")
            return
        self._refresh()

    @Slot()
    def reset_board(self):
        self.session.reset_board()
        logger.info("board reset")
        self._refresh()

    @Slot()
    def restart_game(self):
        # restart keeps the theme, clears the board
        self.session.restart()
        logger.info("game restarted")
        self._refresh()
