import shutil
import subprocess
import sys

from dggit_config import APP_NAME


class GitError(Exception):
    """Raised when staging or committing the saved file fails."""


def commit_message(filename: str) -> str:
    return f"Auto-save: {filename} (via {APP_NAME})"


def _run_git(args: list[str], cwd: str) -> subprocess.CompletedProcess:
    git = shutil.which("git")
    if git is None:
        raise GitError("git not found")

    try:
        return subprocess.run(
            [git, *args],
            cwd=cwd,
            check=False,
            text=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
    except OSError as e:
        raise GitError(str(e)) from e


def run_git_commit(directory: str, filename: str) -> None:
    """Run `git add <filename>` then `git commit` inside `directory`."""
    added = _run_git(["add", filename], cwd=directory)
    if added.returncode != 0:
        raise GitError(f"add: {added.stdout}")

    committed = _run_git(["commit", "-m", commit_message(filename)], cwd=directory)
    if committed.returncode != 0:
        raise GitError(f"commit: {committed.stdout}")

    print(f"Committed {filename} in {directory}", file=sys.stderr)
