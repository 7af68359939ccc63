import pytest

from telesched.evaluation import evaluate_permutation
from telesched.instance import parse_instance
from telesched.nsga2 import (
    RunResult,
    Settings,
    SettingsError,
    main,
    parse_args,
    run,
    write_outputs,
)

INSTANCE_TEXT = """set N:= o1 o2 o3 o4;
set M:= t1 t2;
param: l O D start_cost:=
o1 5 0 300 1
o2 3 100 400 2
o3 4 0 500 3
o4 2 50 200 4
;

param giro: o1 o2 o3 o4:=
o1 0 1 2 3
o2 1 0 3 4
o3 2 3 0 5
o4 3 4 5 0
;
"""


@pytest.fixture
def instance():
    return parse_instance(INSTANCE_TEXT)


def _settings(**overrides):
    values = dict(seed=0.123, popsize=8, ngen=5, pcross=0.9, pmut=0.3)
    values.update(overrides)
    return Settings(**values)


def test_parse_args_reads_all_fields():
    settings = parse_args(["0.5", "data.dat", "12", "7", "0.6", "0.01"])
    assert settings.seed == 0.5
    assert settings.instance_path == "data.dat"
    assert settings.popsize == 12
    assert settings.ngen == 7
    assert settings.pcross == 0.6
    assert settings.pmut == 0.01


def test_parse_args_too_few():
    with pytest.raises(SettingsError):
        parse_args(["0.5", "data.dat", "12"])


def test_parse_args_bad_number():
    with pytest.raises(SettingsError):
        parse_args(["0.5", "data.dat", "many", "7", "0.6", "0.01"])


@pytest.mark.parametrize(
    "overrides",
    [
        {"seed": 0.0},
        {"seed": 1.0},
        {"popsize": 6},
        {"popsize": 0},
        {"ngen": 0},
        {"pcross": 1.5},
        {"pmut": -0.1},
    ],
)
def test_validate_rejects(overrides):
    with pytest.raises(SettingsError):
        _settings(**overrides).validate()


def test_describe_lists_parameters():
    text = _settings(popsize=4, ngen=3).describe()
    assert "\n Population size = 4" in text
    assert "\n Number of generations = 3" in text
    assert "\n Number of objective functions = 2" in text


def test_run_population_invariants(instance):
    result = run(_settings(), instance)
    assert isinstance(result, RunResult)
    assert len(result.initial_population) == 8
    assert len(result.final_population) == 8
    for individual in result.final_population:
        assert sorted(individual.rep) == [0, 1, 2, 3]
        assert individual.objectives == list(evaluate_permutation(individual.rep, instance))
        assert individual.rank >= 1
    ranks = [individual.rank for individual in result.final_population]
    assert ranks == sorted(ranks)


def test_run_is_deterministic(instance):
    first = run(_settings(), instance)
    second = run(_settings(), instance)
    assert [i.rep for i in first.final_population] == [i.rep for i in second.final_population]
    assert first.counts == second.counts


def test_run_without_operators_counts_nothing(instance):
    result = run(_settings(pcross=0.0, pmut=0.0), instance)
    assert result.counts.crossovers == 0
    assert result.counts.mutations == 0


def test_single_generation_keeps_initial(instance):
    result = run(_settings(ngen=1), instance)
    assert [i.rep for i in result.final_population] == [
        i.rep for i in result.initial_population
    ]


def test_run_rejects_invalid_settings(instance):
    with pytest.raises(SettingsError):
        run(_settings(popsize=5), instance)


def test_write_outputs(tmp_path, instance):
    settings = _settings()
    result = run(settings, instance)
    paths = write_outputs(result, settings, tmp_path)
    assert sorted(path.name for path in paths) == [
        "all_pop.out",
        "best_pop.out",
        "final_pop.out",
        "initial_pop.out",
        "params.out",
    ]
    final_lines = (tmp_path / "final_pop.out").read_text().splitlines()
    assert final_lines[0].startswith("#")
    assert len(final_lines) == 1 + settings.popsize
    all_lines = (tmp_path / "all_pop.out").read_text().splitlines()
    assert all_lines[1] == "# gen = 1"
    best_lines = (tmp_path / "best_pop.out").read_text().splitlines()[1:]
    assert best_lines
    assert all("Rank: 1\t" in line for line in best_lines)
    assert "Population size = 8" in (tmp_path / "params.out").read_text()


def test_main_writes_files(tmp_path, monkeypatch, capsys):
    data = tmp_path / "instance.dat"
    data.write_text(INSTANCE_TEXT)
    monkeypatch.chdir(tmp_path)
    code = main(["0.123", str(data), "4", "3", "0.5", "0.5"])
    assert code == 0
    assert (tmp_path / "final_pop.out").exists()
    assert "Generations finished cpu time" in capsys.readouterr().out


def test_main_usage_error(capsys):
    assert main(["0.123"]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_missing_instance(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["0.123", str(tmp_path / "missing.dat"), "4", "3", "0.5", "0.5"]) == 1
    assert not (tmp_path / "final_pop.out").exists()