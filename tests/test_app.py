import dggit
from dggit_config import CONFIG_FILE_NAME, Config, save_config
from dggit_shell import BACKGROUND_MENU

from fakes import FakeClipboard, FakeDialogs, FakeRegistry


def _no_pause(seconds):
    pass


def _run(args, dialogs, clipboard, registry, config_file):
    return dggit.run(args, dialogs, clipboard, registry, str(config_file), lambda: None, _no_pause)


def test_first_run_cancelled_at_folder_step(tmp_path):
    config_file = tmp_path / CONFIG_FILE_NAME
    dialogs = FakeDialogs()
    clipboard = FakeClipboard("void saved()")
    registry = FakeRegistry()

    code = _run([], dialogs, clipboard, registry, config_file)

    assert code == 0
    assert not config_file.exists()
    assert registry.writes == []
    assert clipboard.cleared is False
    assert [p for p in tmp_path.iterdir()] == []


def test_first_run_sets_up_and_stops(tmp_path):
    config_file = tmp_path / CONFIG_FILE_NAME
    out = tmp_path / "out"
    out.mkdir()
    dialogs = FakeDialogs(directories=[str(out)], strings=[".dg", "void "], answers=[False, True, False])
    clipboard = FakeClipboard("void saved()")
    registry = FakeRegistry()

    code = _run([], dialogs, clipboard, registry, config_file)

    assert code == 0
    assert config_file.exists()
    assert (BACKGROUND_MENU + r"\dgGit", "") in registry.values
    assert list(out.iterdir()) == []
    assert clipboard.cleared is False


def test_folder_argument_saves_there(tmp_path):
    config_file = tmp_path / CONFIG_FILE_NAME
    save_config(str(config_file), Config(prefix_to_strip="void |int |string "))
    target = tmp_path / "target"
    target.mkdir()
    dialogs = FakeDialogs()
    clipboard = FakeClipboard("int main(){}\nbody")

    code = _run([str(target)], dialogs, clipboard, FakeRegistry(), config_file)

    assert code == 0
    assert (target / "main(){}.dg").read_text(encoding="utf-8") == "int main(){}\nbody"
    assert dialogs.prompts == []
    assert dialogs.kinds() == ["info"]


def test_auto_save_needs_no_prompt(tmp_path):
    config_file = tmp_path / CONFIG_FILE_NAME
    default_dir = tmp_path / "repo"
    default_dir.mkdir()
    save_config(str(config_file), Config(start_dir=str(default_dir), auto_save=True, show_success=False))
    dialogs = FakeDialogs()

    _run([], dialogs, FakeClipboard("void a()"), FakeRegistry(), config_file)

    assert (default_dir / "a().dg").exists()
    assert dialogs.prompts == []
    assert dialogs.shown == []


def test_registry_failure_stops_before_saving(tmp_path):
    config_file = tmp_path / CONFIG_FILE_NAME
    save_config(str(config_file), Config())
    target = tmp_path / "target"
    target.mkdir()
    dialogs = FakeDialogs()
    clipboard = FakeClipboard("void a()")

    code = _run([str(target)], dialogs, clipboard, FakeRegistry(fail_on="Software"), config_file)

    assert code == 1
    assert dialogs.kinds() == ["error"]
    assert dialogs.shown[0][2].startswith("Setup Error:\nFailed to update registry settings.")
    assert list(target.iterdir()) == []


def test_cancelled_folder_prompt_saves_nothing(tmp_path):
    config_file = tmp_path / CONFIG_FILE_NAME
    save_config(str(config_file), Config(start_dir=str(tmp_path)))
    dialogs = FakeDialogs()
    clipboard = FakeClipboard("void a()")

    code = _run([], dialogs, clipboard, FakeRegistry(), config_file)

    assert code == 0
    assert len(dialogs.prompts) == 1
    assert dialogs.shown == []
    assert clipboard.cleared is False


def test_main_refuses_non_windows(monkeypatch, capsys):
    monkeypatch.setattr(dggit.os, "name", "posix")
    assert dggit.main([]) == 1
    assert "Windows-only" in capsys.readouterr().err


def test_unwritable_settings_file_ends_run_cleanly(tmp_path):
    config_file = tmp_path / "nodir" / CONFIG_FILE_NAME
    dialogs = FakeDialogs(directories=[str(tmp_path)], strings=[".dg", ""], answers=[False, False, False])
    registry = FakeRegistry()

    code = _run([], dialogs, FakeClipboard("void a()"), registry, config_file)

    assert code == 0
    assert registry.writes == []
    assert dialogs.kinds()[-1] == "error"
