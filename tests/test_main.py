import logging

import pytest

from linesim import main as cli
from linesim.errors import InvalidConfiguration

ANSWERS = ["1", "1", "1", "1", "1", "5", "50", "40"]


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def scripted_input(answers):
    remaining = iter(answers)
    return lambda prompt: next(remaining)


def test_prompt_config_reads_in_order():
    config = cli.prompt_config(scripted_input(["1", "2", "3", "4", "5", "6", "70", "80"]), seed=3, max_time=50)

    counts = config.machine_counts
    assert (counts.raw_material, counts.machining, counts.assembly,
            counts.quality_control, counts.packaging) == (1, 2, 3, 4, 5)
    assert (config.setup_time, config.maintenance_interval, config.shift_length) == (6, 70, 80)
    assert config.seed == 3
    assert config.max_time == 50


@pytest.mark.parametrize("bad", ["abc", "2.5", ""])
def test_prompt_config_rejects_non_integers(bad):
    answers = ANSWERS[:]
    answers[2] = bad
    with pytest.raises(InvalidConfiguration):
        cli.prompt_config(scripted_input(answers))


def test_prompt_config_rejects_non_positive():
    answers = ANSWERS[:]
    answers[6] = "0"
    with pytest.raises(InvalidConfiguration, match="maintenance_interval"):
        cli.prompt_config(scripted_input(answers))


def test_main_runs_to_completion(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", scripted_input(ANSWERS))

    assert cli.main(["--seed", "11"]) == 0

    out = capsys.readouterr().out
    assert "Event: ARRIVAL" in out
    assert out.rstrip().endswith("Simulation completed.")


def test_main_reports_bad_input(monkeypatch, capsys):
    answers = ANSWERS[:]
    answers[0] = "-3"
    monkeypatch.setattr("builtins.input", scripted_input(answers))

    assert cli.main([]) == 2
    assert "raw_material" in capsys.readouterr().err
