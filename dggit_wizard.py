import sys
import time

from dggit_config import APP_NAME, DEFAULT_EXTENSION, WIZARD_PREFIXES, Config, save_config

STEP_PAUSE = 0.5  # seconds between prompts so dialogs don't stack

WELCOME_TEXT = (
    f"Welcome to {APP_NAME}!\n\n"
    "It looks like this is your first run. This small utility is designed to save "
    "code copied to your clipboard to a local Git repo.\n\n"
    "But first, we need to set up a few preferences."
)

STEP1_TEXT = (
    "Next, please select the folder where you want your code saved.\n\n"
    "The program will prompt for a save location every time and the file browser will "
    "start in this folder by default, so it's good to set it to your repo or a parent "
    "folder of your repo (you can change this later by editing the config file or "
    "deleting the config file and re-running the setup wizard).\n\n"
    "If you want to use the right-click menu on a specific folder, it doesn't matter "
    "what you choose here because it will save the code from your clipboard in the "
    "folder you right-clicked on instead."
)

STEP2_TEXT = (
    "Next, enter the file extension you want to use for saved files.\n"
    "(e.g., .dg, .txt, .js)"
)

STEP3_TEXT = (
    "Next, enter the text to strip from the start of your copied code to create the "
    "filename.\n\n"
    "You can enter multiple options separated by a pipe symbol (|).\n\n"
    "Example: 'void |int |string '\n"
    "(Note the space after each word if needed)"
)


class SetupCancelled(Exception):
    pass


def _cancelled(dialogs):
    dialogs.warning(APP_NAME, "Setup was cancelled.")
    print("Setup cancelled, no config written", file=sys.stderr)
    return Config(), True


def _collect(dialogs, pause):
    dialogs.info("Step 1 Instructions", STEP1_TEXT)
    pause(STEP_PAUSE)
    start_dir = dialogs.ask_directory(
        "Step 1: Select a folder in which to save the code copied to your clipboard (local repo?)"
    )
    if not start_dir:
        raise SetupCancelled()

    pause(STEP_PAUSE)
    dialogs.info("Step 2 Instructions", STEP2_TEXT)
    pause(STEP_PAUSE)
    ext = dialogs.ask_string("Step 2: File Extension", "File Extension:", DEFAULT_EXTENSION)
    if ext is None:
        raise SetupCancelled()

    pause(STEP_PAUSE)
    dialogs.info("Step 3 Instructions", STEP3_TEXT)
    pause(STEP_PAUSE)
    prefix = dialogs.ask_string("Step 3: Prefix Stripping", "Prefixes (separate with | ):", WIZARD_PREFIXES)
    if prefix is None:
        raise SetupCancelled()

    answers = []
    for title, question, default in (
        ("Step 4: Git Integration",
         "Do you want to run 'git add/commit'\nautomatically upon save?", False),
        ("Step 5: Auto-Save Mode",
         "Do you want to skip the folder dialog and\nALWAYS save to your default folder automatically?", False),
        ("Step 6: Desktop Shortcut",
         "Create a shortcut on your Desktop?", True),
    ):
        pause(STEP_PAUSE)
        answer = dialogs.ask_yes_no(title, question, default)
        if answer is None:
            raise SetupCancelled()
        answers.append(answer)

    use_git, auto_save, make_shortcut = answers
    cfg = Config(
        start_dir=start_dir,
        extension=ext,
        prefix_to_strip=prefix,
        show_success=True,
        auto_save=auto_save,
        git_auto_commit=use_git,
    )
    return cfg, make_shortcut


def run_setup_wizard(config_file, dialogs, make_shortcut, pause=time.sleep):
    """
    First-run setup. Returns (config, cancelled).

    Any cancelled prompt aborts before anything is written. The config is
    saved before the optional shortcut, so a shortcut failure only costs
    the shortcut.
    """
    dialogs.info(APP_NAME, WELCOME_TEXT)

    try:
        cfg, want_shortcut = _collect(dialogs, pause)
    except SetupCancelled:
        return _cancelled(dialogs)

    try:
        save_config(config_file, cfg)
    except OSError as e:
        dialogs.error(APP_NAME, f"Could not save settings to:\n{config_file}\n{e}")
        return Config(), True
    print(f"Config written to {config_file}", file=sys.stderr)

    if want_shortcut:
        try:
            make_shortcut()
        except Exception as e:
            dialogs.error(APP_NAME, f"Could not create shortcut:\n{e}")

    dialogs.info(
        APP_NAME,
        "Setup Complete!\n\n"
        f"Settings saved to:\n{config_file}\n\n"
        "(Edit this file to change settings later)\n\n"
        "You can now use the right-click menu or desktop shortcut.",
    )
    return cfg, False
