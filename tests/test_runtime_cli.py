from orgchart_desktop.runtime import cli as runtime_cli


def test_parse_args_defaults_to_desktop():
    args = runtime_cli.parse_args([])
    assert args.mode == "desktop"
    assert args.url is None
    assert args.debug is None


def test_parse_args_web_subcommand():
    args = runtime_cli.parse_args(["web", "--url", "http://localhost:5173"])
    assert args.mode == "web"
    assert args.url == "http://localhost:5173"


def test_parse_args_legacy_gui_alias():
    args = runtime_cli.parse_args(["gui", "--debug"])
    assert args.mode == "desktop"
    assert args.debug is True


def test_main_dispatches_web(monkeypatch):
    seen = {}
    monkeypatch.setattr(runtime_cli, "run_desktop_mode", lambda _settings: 98)

    def _fake_web(settings):
        seen["url"] = settings.url
        return 7

    monkeypatch.setattr(runtime_cli, "run_web_mode", _fake_web)
    assert runtime_cli.main(["web", "--url", "dist/index.html"]) == 7
    assert seen["url"] == "dist/index.html"


def test_main_dispatches_desktop(monkeypatch):
    seen = {}
    monkeypatch.delenv("ORGCHART_DEBUG", raising=False)

    def _fake_desktop(settings):
        seen["title"] = settings.title
        seen["debug"] = settings.debug
        return 6

    monkeypatch.setattr(runtime_cli, "run_desktop_mode", _fake_desktop)
    monkeypatch.setattr(runtime_cli, "run_web_mode", lambda _settings: 98)
    assert runtime_cli.main(["desktop", "--title", "People"]) == 6
    assert seen == {"title": "People", "debug": False}


def test_options_without_subcommand():
    args = runtime_cli.parse_args(["--url", "dist/index.html", "--debug"])
    assert args.mode == "desktop"
    assert args.url == "dist/index.html"
    assert args.debug is True


def test_options_before_subcommand_are_kept():
    args = runtime_cli.parse_args(["--url", "dist/index.html", "web", "--title", "People"])
    assert args.mode == "web"
    assert args.url == "dist/index.html"
    assert args.title == "People"
    assert args.debug is None
