import io

import pytest

from foxhare.main import main
from foxhare.model.io import ParameterStore
from foxhare.model.parameters import ParameterSet
from foxhare.model.series import PopulationSeries
from foxhare.model.state import AppState
from foxhare.view.charts import NO_DATA_NOTICE
from foxhare.view.shell import Shell

from conftest import ScriptedInput


def make_shell(constants_path, *lines, state=None):
    out = io.StringIO()
    store = ParameterStore(constants_path)
    shell = Shell(state or AppState(), store, input_func=ScriptedInput(*lines), output=out)
    return shell, out


def test_run_then_table(constants_path):
    shell, out = make_shell(constants_path, "3", "100", "10", "1", "4", "7")
    shell.run()
    text = out.getvalue()

    assert "Simulation completed successfully." in text
    assert "0\t100\t10\n1\t90\t19\n" in text
    assert text.rstrip().endswith("Exiting program.")
    assert shell.state.series is None


@pytest.mark.parametrize("choice", ["4", "5", "6"])
def test_views_before_any_run(constants_path, choice):
    shell, out = make_shell(constants_path, choice, "7")
    shell.run()

    assert NO_DATA_NOTICE in out.getvalue()


@pytest.mark.parametrize("duration", ["0", "-3"])
def test_non_positive_duration_keeps_previous_series(constants_path, duration):
    previous = PopulationSeries([1, 2], [3, 4])
    shell, out = make_shell(constants_path, "50", "5", duration, state=AppState(series=previous))

    assert shell.dispatch(3) is True
    assert "Duration must be a positive integer." in out.getvalue()
    assert shell.state.series is previous


def test_new_run_replaces_series(constants_path):
    shell, _ = make_shell(constants_path, "100", "10", "1", "40", "9", "2")
    shell.run_simulation()
    first = shell.state.series
    shell.run_simulation()

    assert shell.state.series is not first
    assert shell.state.series.length == 3
    assert first.length == 2


def test_overflow_is_reported_and_series_kept(constants_path):
    state = AppState(parameters=ParameterSet(birth_rate=1e6))
    shell, out = make_shell(constants_path, "10", "0", "50", state=state)
    shell.run_simulation()

    assert "Simulation aborted" in out.getvalue()
    assert state.series is None


def test_huge_initial_population_keeps_previous_series(constants_path):
    previous = PopulationSeries([1, 2], [3, 4])
    shell, out = make_shell(constants_path, "0", str(10 ** 19), "1", state=AppState(series=previous))

    assert shell.dispatch(3) is True
    assert "Simulation aborted" in out.getvalue()
    assert shell.state.series is previous


def test_huge_initial_population_does_not_end_session(constants_path):
    shell, out = make_shell(constants_path, "3", "0", str(10 ** 19), "1", "7")
    shell.run()

    assert out.getvalue().rstrip().endswith("Exiting program.")


def test_malformed_input_reprompts(constants_path):
    shell, out = make_shell(constants_path, "abc", "", "1", "7")
    shell.run()
    text = out.getvalue()

    assert text.count("Invalid input. Please enter an integer.") == 2
    assert "Current Simulation Constants:" in text


def test_unknown_menu_choice(constants_path):
    shell, out = make_shell(constants_path, "9", "7")
    shell.run()

    assert "Invalid choice. Please select a valid option." in out.getvalue()


def test_display_parameters(constants_path):
    shell, out = make_shell(constants_path)
    shell.display_parameters()

    assert out.getvalue() == (
        "\nCurrent Simulation Constants:\n"
        "1. Rabbit Birth Rate: 0.1000\n"
        "2. Rabbit Death Rate: 0.0500\n"
        "3. Predation Rate (Fox eats Rabbits): 0.0200\n"
        "4. Fox Birth Rate per Rabbit Eaten: 0.0100\n"
        "5. Fox Natural Death Rate: 0.1000\n\n"
    )


def test_edit_saves_after_each_change(constants_path):
    shell, out = make_shell(constants_path, "1", "0.3", "5", "x", "0.25", "0", "6")
    shell.edit_parameters()

    params = shell.state.parameters
    assert params.birth_rate == 0.3
    assert params.fox_death_rate == 0.25
    assert out.getvalue().count("Constants saved successfully.") == 2
    assert "Invalid input. Please enter a number." in out.getvalue()
    assert "Invalid choice. Please select a valid option." in out.getvalue()
    assert ParameterStore(constants_path).load() == params


def test_edit_survives_unwritable_store(tmp_path):
    shell, out = make_shell(str(tmp_path / "missing" / "constants.txt"), "2", "0.7", "6")
    shell.edit_parameters()

    assert "Error opening constants file for writing." in out.getvalue()
    assert shell.state.parameters.death_rate == 0.7


def test_edited_rates_drive_next_run(constants_path):
    shell, _ = make_shell(constants_path, "1", "0.5", "6", "10", "0", "1")
    shell.dispatch(2)
    shell.dispatch(3)

    # 10 + 0.5*10 with no foxes
    assert shell.state.series.rabbits.tolist() == [10, 15]
    assert ParameterStore(constants_path).load().birth_rate == 0.5


def test_end_of_input_exits_cleanly(constants_path):
    shell, out = make_shell(constants_path, "3", "100")
    shell.run()

    assert out.getvalue().rstrip().endswith("Exiting program.")


def test_menu_lists_seven_options(constants_path):
    shell, out = make_shell(constants_path)
    shell.display_menu()
    lines = out.getvalue().splitlines()

    assert lines[0] == "===== Fox-Hare Population Simulation ====="
    assert [line.split(".")[0] for line in lines[1:8]] == [str(i) for i in range(1, 8)]
    assert lines[7] == "7. Exit"


def test_main_reports_created_file(constants_path, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", ScriptedInput("7"))
    main(["--constants-file", constants_path])
    text = capsys.readouterr().out

    assert text.startswith("Constants file created with default values.")
    assert "Exiting program." in text


def test_main_reports_malformed_file(constants_path, monkeypatch, capsys):
    with open(constants_path, "w", encoding="utf-8") as f:
        f.write("nonsense")
    monkeypatch.setattr("builtins.input", ScriptedInput("1", "7"))
    main(["--constants-file", constants_path])
    text = capsys.readouterr().out

    assert text.startswith("Error reading constants file. Using default values.")
    assert "1. Rabbit Birth Rate: 0.1000" in text
