import tkinter as tk
from tkinter import filedialog, messagebox, simpledialog

import pyperclip


class TkDialogs:
    """Native dialogs on a hidden, always-on-top tkinter root."""

    def __init__(self):
        self.root = None

    def _parent(self):
        if self.root is None:
            self.root = tk.Tk()
            self.root.withdraw()
            self.root.attributes('-topmost', True)
        return self.root

    def info(self, title, message):
        messagebox.showinfo(title, message, parent=self._parent())

    def warning(self, title, message):
        messagebox.showwarning(title, message, parent=self._parent())

    def error(self, title, message):
        messagebox.showerror(title, message, parent=self._parent())

    def ask_directory(self, title, initial_dir=None) -> str:
        """Return the chosen folder, or "" when cancelled."""
        kwargs = {"title": title, "parent": self._parent(), "mustexist": True}
        if initial_dir:
            kwargs["initialdir"] = initial_dir
        chosen = filedialog.askdirectory(**kwargs)
        return chosen or ""

    def ask_string(self, title, prompt, default="") -> str | None:
        """Return the entered text, or None when cancelled."""
        return simpledialog.askstring(title, prompt, initialvalue=default, parent=self._parent())

    def ask_yes_no(self, title, question, default=False) -> bool | None:
        """Return True/False, or None when cancelled."""
        return messagebox.askyesnocancel(
            title,
            question,
            default=messagebox.YES if default else messagebox.NO,
            parent=self._parent(),
        )

    def close(self):
        if self.root is not None:
            try:
                self.root.destroy()
            except tk.TclError:
                pass
            self.root = None


class SystemClipboard:
    """OS clipboard through pyperclip."""

    def read(self) -> str:
        return pyperclip.paste() or ""

    def clear(self) -> None:
        pyperclip.copy("")
