import pyperclip

from statement_scanner.logging.logger import Log


class ClipboardSink:
    """Copies text to the system clipboard."""

    def copy(self, text: str) -> bool:
        """Place text on the clipboard.

        Returns:
            True on success, False if the host denied or lacks clipboard access.
        """
        try:
            pyperclip.copy(text)
        except (pyperclip.PyperclipException, OSError) as exc:
            Log.error(f"Failed to copy text: {exc}")
            return False
        return True
