import os
import sys
from dataclasses import dataclass

from dggit_config import APP_NAME
from dggit_filename import derive_filename
from dggit_git import GitError, run_git_commit

FOLDER_PROMPT = (
    "Be sure you have COPIED YOUR CODE TO THE CLIPBOARD FIRST "
    "and then select folder to save code into"
)


@dataclass
class SaveResult:
    path: str
    filename: str
    git_status: str = ""


def ask_for_folder(dialogs, start_dir) -> str:
    initial = start_dir if start_dir and os.path.isdir(start_dir) else None
    return dialogs.ask_directory(FOLDER_PROMPT, initial)


def resolve_save_dir(args, cfg, dialogs) -> str:
    """
    Folder from the context menu argument, else the default folder in
    auto-save mode, else whatever the user picks. "" means stop.
    """
    if args:
        return args[0].strip()

    if cfg.auto_save and os.path.exists(cfg.start_dir):
        return cfg.start_dir

    return ask_for_folder(dialogs, cfg.start_dir)


def write_file(path: str, content: str) -> None:
    # encode first so a bad character never leaves a truncated file behind
    data = content.encode("utf-8", errors="replace")
    with open(path, "wb") as f:
        f.write(data)


def commit_status(save_dir, filename, committer) -> str:
    try:
        committer(save_dir, filename)
    except GitError as e:
        print(f"Git commit failed: {e}", file=sys.stderr)
        return f"\n(Git Commit Failed: {e})"
    return "\n(Git Commit Successful)"


def save_clipboard(save_dir, cfg, clipboard, dialogs, committer=run_git_commit) -> SaveResult | None:
    """
    Write the clipboard to save_dir. Returns None when there was nothing
    to save or the write failed.
    """
    if not save_dir:
        return None

    try:
        content = clipboard.read()
    except Exception as e:
        print(f"Clipboard read failed: {e}", file=sys.stderr)
        return None
    if not content:
        return None

    filename = derive_filename(content, cfg.prefixes(), cfg.extension)
    if filename is None:
        return None

    full_path = os.path.join(save_dir, filename)
    try:
        write_file(full_path, content)
    except (OSError, UnicodeError) as e:
        dialogs.error(APP_NAME, f"Error saving file:\n{e}")
        return None
    print(f"Saved: {full_path}", file=sys.stderr)

    git_status = ""
    if cfg.git_auto_commit:
        git_status = commit_status(save_dir, filename, committer)

    try:
        clipboard.clear()
    except Exception:
        pass

    if cfg.show_success:
        dialogs.info(APP_NAME, f"Saved to:\n{full_path}{git_status}\n\n(Clipboard Cleared)")

    return SaveResult(path=full_path, filename=filename, git_status=git_status.strip())
