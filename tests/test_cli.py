import pytest

from envkit.cli import EXIT_NOT_SET, EXIT_OK, EXIT_PARSE_ERROR, main


def test_get_prints_raw_value(monkeypatch, capsys) -> None:
    monkeypatch.setenv("CLI_HOST", "10.0.0.1")
    assert main(["get", "CLI_HOST"]) == EXIT_OK
    assert capsys.readouterr().out == "10.0.0.1\n"


def test_get_missing_exits_not_set(monkeypatch, capsys) -> None:
    monkeypatch.delenv("CLI_MISSING", raising=False)
    assert main(["get", "CLI_MISSING"]) == EXIT_NOT_SET
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "`CLI_MISSING` is not set" in captured.err


def test_get_with_default(monkeypatch, capsys) -> None:
    monkeypatch.delenv("CLI_MISSING", raising=False)
    assert main(["get", "CLI_MISSING", "--default", "fallback"]) == EXIT_OK
    assert capsys.readouterr().out == "fallback\n"


def test_int_and_float(monkeypatch, capsys) -> None:
    monkeypatch.setenv("CLI_PORT", "8080")
    monkeypatch.setenv("CLI_RATIO", "0.5")
    assert main(["int", "CLI_PORT"]) == EXIT_OK
    assert main(["float", "CLI_RATIO"]) == EXIT_OK
    assert capsys.readouterr().out == "8080\n0.5\n"


def test_int_parse_error(monkeypatch, capsys) -> None:
    monkeypatch.setenv("CLI_PORT", "eighty")
    assert main(["int", "CLI_PORT"]) == EXIT_PARSE_ERROR
    assert "Failed to parse environment variable `CLI_PORT`" in capsys.readouterr().err


def test_int_default_covers_missing_and_invalid(monkeypatch, capsys) -> None:
    monkeypatch.delenv("CLI_PORT", raising=False)
    assert main(["int", "CLI_PORT", "--default", "5432"]) == EXIT_OK
    monkeypatch.setenv("CLI_PORT", "bad")
    assert main(["int", "CLI_PORT", "--default", "5432"]) == EXIT_OK
    assert capsys.readouterr().out == "5432\n5432\n"


def test_bool(monkeypatch, capsys) -> None:
    monkeypatch.setenv("CLI_FLAG", "ON")
    monkeypatch.delenv("CLI_UNSET_FLAG", raising=False)
    assert main(["bool", "CLI_FLAG"]) == EXIT_OK
    assert main(["bool", "CLI_UNSET_FLAG"]) == EXIT_OK
    assert capsys.readouterr().out == "true\nfalse\n"


def test_list(monkeypatch, capsys) -> None:
    monkeypatch.setenv("CLI_TAGS", "web; api ;db")
    assert main(["list", "CLI_TAGS", "--sep", ";"]) == EXIT_OK
    assert capsys.readouterr().out == "web\napi\ndb\n"


def test_size(monkeypatch, capsys) -> None:
    monkeypatch.setenv("CLI_SIZE", "2KB")
    assert main(["size", "CLI_SIZE"]) == EXIT_OK
    assert capsys.readouterr().out == "2048\n"


def test_log_level_from_environment(monkeypatch, capsys) -> None:
    monkeypatch.setenv("ENVKIT_LOG_LEVEL", "debug")
    monkeypatch.setenv("CLI_HOST", "h")
    assert main(["get", "CLI_HOST"]) == EXIT_OK
    assert "get CLI_HOST" in capsys.readouterr().err


def test_log_level_flag_overrides_environment(monkeypatch, capsys) -> None:
    monkeypatch.setenv("ENVKIT_LOG_LEVEL", "debug")
    monkeypatch.setenv("CLI_HOST", "h")
    assert main(["--log-level", "error", "get", "CLI_HOST"]) == EXIT_OK
    assert capsys.readouterr().err == ""


def test_unknown_command_is_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["explode", "X"])
    assert excinfo.value.code == 2


def test_list_empty_separator_is_usage_error(monkeypatch, capsys) -> None:
    monkeypatch.setenv("CLI_TAGS", "a,b")
    with pytest.raises(SystemExit) as excinfo:
        main(["list", "CLI_TAGS", "--sep", ""])
    assert excinfo.value.code == 2
    assert "--sep must not be empty" in capsys.readouterr().err


def test_list_keeps_empty_items(monkeypatch, capsys) -> None:
    monkeypatch.setenv("CLI_DSN", "host,,5432")
    assert main(["list", "CLI_DSN"]) == EXIT_OK
    assert capsys.readouterr().out == "host\n\n5432\n"
