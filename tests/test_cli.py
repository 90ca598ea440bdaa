import io

import pytest

from labkit.dilemma.cli import (
    SimulationParams,
    main,
    parse_arguments,
    parse_command_line,
)


def test_parses_minimum_arguments_correctly():
    params = parse_command_line(["TitForTat AlwaysCooperate AlwaysDefect"])
    assert params.strategies == ["TitForTat", "AlwaysCooperate", "AlwaysDefect"]
    assert params.mode == "detailed"
    assert params.steps == 20
    assert params.config_dir == ""
    assert params.matrix_file == ""


def test_parses_minimum_tournament_arguments_correctly():
    params = parse_command_line(
        ["TitForTat AlwaysCooperate AlwaysDefect FakeStrategy"]
    )
    assert params.strategies == [
        "TitForTat",
        "AlwaysCooperate",
        "AlwaysDefect",
        "FakeStrategy",
    ]
    assert params.mode == "tournament"
    assert params.steps == 20
    assert params.config_dir == ""
    assert params.matrix_file == ""


def test_parses_full_arguments_correctly(tmp_path):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    matrix = config_dir / "Strict Punishment for Betrayal.conf"
    matrix.write_text("choice;count;result\nC;0;7\n", encoding="utf-8")
    params = parse_command_line(
        [
            "RandomChoice AlwaysDefect AlwaysCooperate AdaptiveCooperator",
            "--mode=tournament",
            "--steps=100",
            f"--configs={config_dir}",
            f"--matrix={matrix}",
        ]
    )
    assert params.strategies == [
        "RandomChoice",
        "AlwaysDefect",
        "AlwaysCooperate",
        "AdaptiveCooperator",
    ]
    assert params.mode == "tournament"
    assert params.steps == 100
    assert params.config_dir == str(config_dir)
    assert params.matrix_file == str(matrix)


def test_strategies_from_separate_arguments():
    params = parse_command_line(["A", "B", "C", "--mode=fast"])
    assert params.strategies == ["A", "B", "C"]
    assert params.mode == "fast"


def test_invalid_steps_raises():
    with pytest.raises(ValueError):
        parse_command_line(
            ["TitForTat AlwaysCooperate AdaptiveCooperator", "--steps=-10"]
        )


def test_non_numeric_steps_raises():
    with pytest.raises(ValueError):
        parse_command_line(["A B C", "--steps=many"])


def test_invalid_config_dir_raises():
    with pytest.raises(ValueError):
        parse_command_line(
            ["TitForTat AlwaysCooperate AdaptiveCooperator", "--configs=fakeConfig"]
        )


def test_invalid_matrix_raises():
    with pytest.raises(ValueError):
        parse_command_line(
            ["TitForTat AlwaysCooperate AdaptiveCooperator", "--matrix=fakeMatrix.conf"]
        )


def test_invalid_argument_format_raises():
    with pytest.raises(ValueError):
        parse_command_line(["--invalidOption=value"])


def test_missing_strategies_raises():
    with pytest.raises(ValueError):
        parse_command_line(["AlwaysCooperate"])


@pytest.mark.parametrize(
    "strategies, mode",
    [
        ("A B C", "tournament"),
        ("A B C D", "fast"),
        ("A B C D", "detailed"),
        ("A B C", "bogus"),
    ],
)
def test_mode_and_strategy_count_must_agree(strategies, mode):
    with pytest.raises(ValueError):
        parse_command_line([strategies, f"--mode={mode}"])


def test_parse_arguments_splits_options_and_names():
    args = parse_arguments(["A", "--steps=5", "B", "--flag"])
    assert args == {"strategies": "A B ", "--steps": "5", "--flag": ""}


def test_describe_reports_missing_matrix():
    params = SimulationParams(["A", "B", "C"], "fast", 7, "", "")
    text = params.describe()
    assert "A B C" in text
    assert "fast" in text
    assert "7" in text
    assert "not specified" in text


def test_main_fast_mode(capsys):
    code = main(["AlwaysCooperate AlwaysDefect Eye4Eye", "--mode=fast", "--steps=2"])
    out = capsys.readouterr().out
    assert code == 0
    assert "AlwaysCooperate: total score = 6" in out
    assert "AlwaysDefect: total score = 18" in out
    assert "Eye4Eye: total score = 6" in out


def test_main_detailed_mode_reads_enter(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n\n"))
    code = main(["AlwaysCooperate AlwaysCooperate AlwaysCooperate", "--steps=2"])
    out = capsys.readouterr().out
    assert code == 0
    assert "AlwaysCooperate: total score = 14" in out


def test_main_uses_strategy_config_directory(tmp_path, capsys):
    (tmp_path / "AdaptiveCooperator.conf").write_text(
        "cooperation_threshold = 0.5\n", encoding="utf-8"
    )
    code = main(
        [
            "AdaptiveCooperator AlwaysCooperate AlwaysCooperate",
            "--mode=fast",
            "--steps=1",
            f"--configs={tmp_path}",
        ]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "AdaptiveCooperator: total score = 7" in out


def test_main_unknown_strategy_fails(capsys):
    code = main(["Nobody AlwaysCooperate AlwaysDefect", "--mode=fast"])
    assert code == 1
    assert "Strategy not found: Nobody" in capsys.readouterr().err


def test_main_bad_arguments_fail(capsys):
    code = main(["AlwaysCooperate"])
    assert code == 1
    assert capsys.readouterr().err.startswith("Error:")