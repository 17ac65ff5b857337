import pytest

from cryptolab.sbox import main, substitute


def test_substitution_is_a_permutation():
    assert sorted(substitute(value) for value in range(16)) == list(range(16))


@pytest.mark.parametrize("value, expected", [(0, 14), (1, 4), (12, 9), (15, 5)])
def test_table_entries(value, expected):
    assert substitute(value) == expected


@pytest.mark.parametrize("value", [-1, 16, 100])
def test_out_of_range_raises(value):
    with pytest.raises(ValueError):
        substitute(value)


def test_main_prints_binary_and_decimal(capsys):
    assert main(["0"]) == 0
    assert capsys.readouterr().out == "Saída cifrada: 1110 (decimal: 14)\n"


def test_main_reports_invalid_input(capsys):
    assert main(["16"]) == 1
    assert "Entrada inválida" in capsys.readouterr().out


def test_main_prompts_when_no_argument(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "15")
    assert main([]) == 0
    assert capsys.readouterr().out == "Saída cifrada: 0101 (decimal: 5)\n"


def test_main_rejects_non_number():
    with pytest.raises(SystemExit):
        main(["abc"])