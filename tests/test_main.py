import builtins

from sysinfo import main as main_module
from sysinfo.modules.base import CollectorUnavailable, Metric


def use_modules(monkeypatch, fake_module):
    modules = [
        fake_module("cpu", "CPU Information", [Metric.integer("Processors", 2)]),
        fake_module("power", "Power Status", error=CollectorUnavailable("power", "no battery detected")),
    ]
    monkeypatch.setattr(main_module, "get_all_modules", lambda: modules)
    return modules


def test_main_prints_report_and_waits_for_enter(monkeypatch, capsys, fake_module):
    use_modules(monkeypatch, fake_module)
    prompts = []
    monkeypatch.setattr(builtins, "input", lambda prompt="": prompts.append(prompt) or "")

    assert main_module.main() == 0

    out = capsys.readouterr().out
    assert "CPU INFORMATION" in out
    assert "Processors: 2" in out
    assert "unavailable (no battery detected)" in out
    assert len(prompts) == 1
    assert prompts[0].endswith(main_module.EXIT_PROMPT)


def test_main_exits_cleanly_on_eof(monkeypatch, capsys, fake_module):
    use_modules(monkeypatch, fake_module)

    def closed_stdin(prompt=""):
        raise EOFError

    monkeypatch.setattr(builtins, "input", closed_stdin)

    assert main_module.main() == 0
    assert "POWER STATUS" in capsys.readouterr().out


def test_setup_logging_ignores_unknown_level(monkeypatch):
    monkeypatch.setenv(main_module.LOG_LEVEL_ENV, "chatty")
    main_module.setup_logging()
