#!/usr/bin/env python3
# dgGit: save the clipboard to a file named after its first line,
# optionally committing it to git.
#
# Windows. Requires:
#   pip install pyperclip pywin32
#
# Usage (normally started from the Explorer right-click menu):
#   dggit.py            save into the default / chosen folder
#   dggit.py <folder>   save into <folder>
#
# Settings live in dggit.cfg next to this script (or the exe). Delete it
# to re-run the setup wizard.

import argparse
import os
import sys
import time

from dggit_config import APP_NAME, config_path, load_config
from dggit_pipeline import resolve_save_dir, save_clipboard
from dggit_shell import WinRegistry, create_desktop_shortcut, update_context_menu
from dggit_wizard import run_setup_wizard


def run(args, dialogs, clipboard, registry, config_file, make_shortcut=create_desktop_shortcut, pause=time.sleep) -> int:
    def wizard(path):
        return run_setup_wizard(path, dialogs, make_shortcut, pause)

    cfg, cancelled, first_run = load_config(config_file, wizard)
    if cancelled:
        return 0

    try:
        update_context_menu(registry)
    except OSError as e:
        dialogs.error(APP_NAME, f"Setup Error:\nFailed to update registry settings.\n{e}")
        return 1

    # first launch only sets things up
    if first_run:
        return 0

    save_dir = resolve_save_dir(args, cfg, dialogs)
    save_clipboard(save_dir, cfg, clipboard, dialogs)
    return 0


def main(argv=None):
    p = argparse.ArgumentParser(
        prog="dggit",
        description="Save the clipboard to a file named after its first line.",
    )
    p.add_argument("folder", nargs="?", help="Folder to save into (passed by the folder context menu)")
    ns = p.parse_args(argv)

    if os.name != "nt":
        print("This tool is Windows-only.", file=sys.stderr)
        return 1

    from dggit_desktop import SystemClipboard, TkDialogs

    dialogs = TkDialogs()
    try:
        return run(
            [ns.folder] if ns.folder is not None else [],
            dialogs,
            SystemClipboard(),
            WinRegistry(),
            config_path(),
        )
    finally:
        dialogs.close()


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
