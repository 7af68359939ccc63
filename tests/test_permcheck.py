import pytest

from telesched.evaluation import evaluate_permutation
from telesched.instance import parse_instance
from telesched.permcheck import PermutationError, main, parse_permutation, read_permutation

INSTANCE_TEXT = """set N:= o1 o2 o3;
set M:= t1 t2;
param: l O D start_cost:=
o1 5 0 300 1
o2 3 100 400 2
o3 4 0 500 3
;

param giro: o1 o2 o3:=
o1 0 1 2
o2 1 0 3
o3 2 3 0
;
"""


def test_parse_permutation_reads_numbers():
    assert parse_permutation("2 0 1\n", 3) == [2, 0, 1]


def test_parse_permutation_uses_first_line_only():
    assert parse_permutation("0 1 2\n9 9\n", 3) == [0, 1, 2]


def test_parse_permutation_too_many():
    with pytest.raises(PermutationError, match="more numbers"):
        parse_permutation("0 1 2 3\n", 3)


def test_parse_permutation_too_few():
    with pytest.raises(PermutationError, match="not enough"):
        parse_permutation("0 1\n", 3)


def test_parse_permutation_empty():
    with pytest.raises(PermutationError):
        parse_permutation("", 3)


def test_read_permutation_round_trip(tmp_path):
    path = tmp_path / "perm.txt"
    path.write_text(" ".join(str(value) for value in [1, 2, 0]) + "\n")
    assert read_permutation(path, 3) == [1, 2, 0]


def test_main_prints_schedule(tmp_path, capsys):
    instance_path = tmp_path / "instance.dat"
    instance_path.write_text(INSTANCE_TEXT)
    perm_path = tmp_path / "perm.txt"
    perm_path.write_text("2 0 1\n")
    assert main([str(instance_path), str(perm_path)]) == 0
    out = capsys.readouterr().out
    value, cost = evaluate_permutation([2, 0, 1], parse_instance(INSTANCE_TEXT))
    assert "Permutation: 2 0 1" in out
    assert f"value: {value:f}" in out
    assert f"cost: {cost:f}" in out
    assert "Telescope 0" in out
    assert "Telescope 1" in out


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_bad_permutation(tmp_path):
    instance_path = tmp_path / "instance.dat"
    instance_path.write_text(INSTANCE_TEXT)
    perm_path = tmp_path / "perm.txt"
    perm_path.write_text("0 1\n")
    assert main([str(instance_path), str(perm_path)]) == 1


def test_main_missing_permutation_file(tmp_path):
    instance_path = tmp_path / "instance.dat"
    instance_path.write_text(INSTANCE_TEXT)
    assert main([str(instance_path), str(tmp_path / "absent.txt")]) == 1