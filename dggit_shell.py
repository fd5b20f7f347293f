import os
import sys

from dggit_config import APP_NAME

# per-user keys under HKEY_CURRENT_USER
BACKGROUND_MENU = r"Software\Classes\Directory\Background\shell"
FOLDER_MENU = r"Software\Classes\Directory\shell"
LEGACY_FILE_MENU = r"Software\Classes\*\shell"

MENU_ICON = "shell32.dll,259"


class WinRegistry:
    """HKEY_CURRENT_USER string values through winreg."""

    def __init__(self):
        import winreg  # Windows-only
        self.winreg = winreg

    def read_value(self, key_path, name=""):
        try:
            with self.winreg.OpenKey(self.winreg.HKEY_CURRENT_USER, key_path) as k:
                value, _ = self.winreg.QueryValueEx(k, name)
                return value
        except FileNotFoundError:
            return None

    def set_value(self, key_path, name, value):
        with self.winreg.CreateKeyEx(
            self.winreg.HKEY_CURRENT_USER, key_path, 0, self.winreg.KEY_ALL_ACCESS
        ) as k:
            self.winreg.SetValueEx(k, name, 0, self.winreg.REG_SZ, value)

    def delete_key(self, key_path):
        self.winreg.DeleteKey(self.winreg.HKEY_CURRENT_USER, key_path)


def launch_target() -> tuple[str, list[str]]:
    """
    (program, leading args) that start dgGit. A frozen exe runs directly;
    a script run goes through pythonw.exe so no console window opens.
    """
    if getattr(sys, "frozen", False):
        return os.path.abspath(sys.executable), []

    exe = os.path.abspath(sys.executable)
    pythonw = os.path.join(os.path.dirname(exe), "pythonw.exe")
    if os.path.exists(pythonw):
        exe = pythonw
    script = os.path.join(os.path.dirname(os.path.abspath(__file__)), "dggit.py")
    return exe, [script]


def launch_command(pass_arg: bool) -> str:
    program, args = launch_target()
    cmd = " ".join(f'"{p}"' for p in [program, *args])
    if pass_arg:
        cmd += ' "%1"'
    return cmd


def set_menu_key(registry, base_path, command):
    key_path = base_path + "\\" + APP_NAME
    cmd_path = key_path + r"\command"

    registry.set_value(key_path, "", APP_NAME)
    registry.set_value(key_path, "Icon", MENU_ICON)

    if registry.read_value(cmd_path) != command:
        registry.set_value(cmd_path, "", command)


def update_context_menu(registry, background_command=None, folder_command=None):
    """
    Refresh both Explorer entries and drop the old per-file one.
    Raises OSError when a key cannot be written.
    """
    if background_command is None:
        background_command = launch_command(pass_arg=False)
    if folder_command is None:
        folder_command = launch_command(pass_arg=True)

    set_menu_key(registry, BACKGROUND_MENU, background_command)
    set_menu_key(registry, FOLDER_MENU, folder_command)

    legacy = LEGACY_FILE_MENU + "\\" + APP_NAME
    for key_path in (legacy + r"\command", legacy):
        try:
            registry.delete_key(key_path)
        except OSError:
            pass


def desktop_shortcut_path() -> str:
    return os.path.join(os.path.expanduser("~"), "Desktop", APP_NAME + ".lnk")


def create_desktop_shortcut():
    import pythoncom  # pywin32
    import win32com.client  # pywin32

    program, args = launch_target()

    pythoncom.CoInitialize()
    try:
        shell = win32com.client.Dispatch("WScript.Shell")
        shortcut = shell.CreateShortCut(desktop_shortcut_path())
        shortcut.TargetPath = program
        shortcut.Arguments = " ".join(f'"{a}"' for a in args)
        shortcut.WorkingDirectory = os.path.dirname(args[0] if args else program)
        shortcut.Save()
    finally:
        pythoncom.CoUninitialize()
    print(f"Shortcut created: {desktop_shortcut_path()}", file=sys.stderr)
