import os
import sys
from dataclasses import dataclass

# ---------------- Config ----------------
APP_NAME = "dgGit"
CONFIG_FILE_NAME = "dggit.cfg"

DEFAULT_START_DIR = "."
DEFAULT_EXTENSION = ".dg"
DEFAULT_PREFIX = "void "
WIZARD_PREFIXES = "void |int |string "

PREFIX_SEPARATOR = "|"


@dataclass
class Config:
    start_dir: str = DEFAULT_START_DIR
    extension: str = DEFAULT_EXTENSION
    prefix_to_strip: str = DEFAULT_PREFIX
    show_success: bool = True
    auto_save: bool = False
    git_auto_commit: bool = False

    def prefixes(self) -> list[str]:
        return [p for p in self.prefix_to_strip.split(PREFIX_SEPARATOR) if p]


CONFIG_TEMPLATE = """# dgGit Configuration File

# 1. Default Save Directory
# The folder where files will save (unless you right-click a specific folder).
StartDir={start_dir}

# 2. File Extension
# The extension appended to saved files (e.g. .dg, .txt, .js)
Extension={extension}

# 3. Clipboard Cleaning
# Text to automatically remove from the start of the filename.
# You can separate multiple options with a pipe symbol "|".
# Example: "void |int |string "
PrefixToStrip={prefix_to_strip}

# 4. User Interface
# Show a popup message when a file is saved successfully? (true/false)
ShowSuccessMessage={show_success}

# 5. Automation
# Save immediately to StartDir without showing the folder browser? (true/false)
AutoSave={auto_save}

# 6. Version Control
# Automatically run 'git add' and 'git commit' after saving? (true/false)
# Note: Git must be installed and the target folder must be a git repo.
GitAutoCommit={git_auto_commit}
"""


def app_dir() -> str:
    # frozen builds keep dggit.cfg beside the exe, script runs beside dggit.py
    if getattr(sys, "frozen", False):
        return os.path.dirname(os.path.abspath(sys.executable))
    return os.path.dirname(os.path.abspath(__file__))


def config_path() -> str:
    return os.path.join(app_dir(), CONFIG_FILE_NAME)


def _flag(value: bool) -> str:
    return "true" if value else "false"


def format_config(cfg: Config) -> str:
    return CONFIG_TEMPLATE.format(
        start_dir=cfg.start_dir,
        extension=cfg.extension,
        # quoted, or the trailing space of "string " is lost on reload
        prefix_to_strip=f'"{cfg.prefix_to_strip}"',
        show_success=_flag(cfg.show_success),
        auto_save=_flag(cfg.auto_save),
        git_auto_commit=_flag(cfg.git_auto_commit),
    )


def save_config(path: str, cfg: Config) -> None:
    # newline="" so the file is byte-for-byte what format_config produced
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(format_config(cfg))


def parse_config(text: str) -> Config:
    """
    Permissive key=value parser. Unknown keys and lines without '=' are
    skipped; anything missing keeps its built-in default.
    """
    cfg = Config()
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, val = line.split("=", 1)
        key = key.strip().lower()
        val = val.strip()

        if key == "startdir":
            cfg.start_dir = val
        elif key == "extension":
            cfg.extension = val
        elif key == "prefixtostrip":
            cfg.prefix_to_strip = val.strip('"')
        elif key == "showsuccessmessage":
            cfg.show_success = val == "true"
        elif key == "autosave":
            cfg.auto_save = val == "true"
        elif key == "gitautocommit":
            cfg.git_auto_commit = val == "true"

    return cfg


def load_config(path: str, wizard) -> tuple[Config, bool, bool]:
    """
    Return (config, cancelled, first_run).

    A missing settings file hands over to the setup wizard; wizard(path)
    must return (config, cancelled).
    """
    if not os.path.exists(path):
        cfg, cancelled = wizard(path)
        return cfg, cancelled, True

    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            text = f.read()
    except OSError as e:
        print(f"Could not read {path}, using defaults: {e}", file=sys.stderr)
        return Config(), False, False

    return parse_config(text), False, False
