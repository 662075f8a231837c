"""Help dialog showing keyboard shortcuts."""

from PySide6.QtWidgets import QDialog, QTextEdit, QVBoxLayout

from ...core.constants import RESET_SHORTCUT, QUIT_SHORTCUT, HELP_SHORTCUT


class HelpDialog(QDialog):
    """Read-only list of the mouse and keyboard controls."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Help / Keyboard Shortcuts")
        self.resize(420, 260)

        text = QTextEdit(self)
        text.setReadOnly(True)

        content = (
            "Spectrogram viewer\n"
            "==================\n\n"
            "[Mouse]\n"
            "  Left-drag : select a region\n"
            "  Release   : zoom the selected region to fill the window\n\n"
            "[Keyboard]\n"
            f"  {RESET_SHORTCUT:<7}: zoom out to the full image\n"
            f"  {QUIT_SHORTCUT:<7}: quit\n"
            f"  {HELP_SHORTCUT:<7}: show this help\n\n"
            "Each zoom replaces the previous one; there is no zoom history.\n"
        )
        text.setPlainText(content)

        layout = QVBoxLayout(self)
        layout.addWidget(text)
