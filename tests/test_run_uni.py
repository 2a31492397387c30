import json
import sys

import pytest

import run_uni
from gerador import MarsagliaGenerator


def test_load_config_skips_comment_lines(tmp_path):
    path = tmp_path / "modelo.yml"
    path.write_text("# comentario\n!outro\nseed: 170\ncount: 3\n")
    assert run_uni.load_config(str(path)) == {'seed': 170, 'count': 3}


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_uni.load_config(str(tmp_path / "nao_existe.yml"))


def test_load_config_invalid_yaml_exits(tmp_path, capsys):
    path = tmp_path / "ruim.yml"
    path.write_text("seed: [1, 2\n")
    with pytest.raises(SystemExit) as exc:
        run_uni.load_config(str(path))
    assert exc.value.code == 1
    assert "Erro ao parsear" in capsys.readouterr().out


def test_run_reports_values_and_summary():
    results = run_uni.run({'seed': 170, 'count': 5, 'bins': 4})
    expected = MarsagliaGenerator(seed=170).draw(5)
    assert results['semente'] == 170
    assert results['valores'] == expected
    assert results['randoms_usados'] == 5
    assert results['descartados'] == 0
    assert results['media'] == pytest.approx(sum(expected) / 5)
    assert results['minimo'] == min(expected)
    assert results['maximo'] == max(expected)
    assert len(results['prob_faixa']) == 4
    assert sum(results['prob_faixa']) == pytest.approx(1.0)


def test_run_james_check():
    results = run_uni.run({'ij': 1802, 'kl': 9373, 'skip': 20000, 'count': 6})
    assert results['semente'] == "1802/9373"
    assert results['randoms_usados'] == 20006
    assert [v * 4096.0 * 4096.0 for v in results['valores']] == [
        6533892.0, 14220222.0, 7275067.0, 6172232.0, 8354498.0, 10633180.0]


def test_run_with_number_list():
    results = run_uni.run({'rndnumbers': [0.1, 0.6, 0.9], 'count': 2, 'skip': 1, 'bins': 2})
    assert results['semente'] is None
    assert results['valores'] == [0.6, 0.9]
    assert results['prob_faixa'] == [0.0, 1.0]


def test_run_zero_count():
    results = run_uni.run({'seed': 3, 'count': 0})
    assert results['valores'] == []
    assert results['media'] is None
    assert results['prob_faixa'] == [0] * 10


def test_run_rejects_bad_parameters():
    with pytest.raises(ValueError):
        run_uni.run({'seed': 1, 'bins': 0})
    with pytest.raises(ValueError):
        run_uni.run({'seed': 1, 'skip': -2})


def test_frequencies():
    assert run_uni.frequencies([0.0, 0.49, 0.5, 0.99], 2) == [0.5, 0.5]


def test_main_single_seed(tmp_path, monkeypatch, capsys):
    path = tmp_path / "modelo.yml"
    path.write_text("seed: 170\ncount: 1\n")
    monkeypatch.setattr(sys, "argv", ["run_uni.py", str(path)])
    run_uni.main()
    out = capsys.readouterr().out
    assert "U[1] = 0.687533438205719" in out
    saved = json.loads((tmp_path / "modelo.result.json").read_text())
    assert saved['valores'] == [0.687533438205719]


def test_main_multiple_seeds(tmp_path, monkeypatch, capsys):
    path = tmp_path / "modelo.yml"
    path.write_text("seeds: [170, 171]\ncount: 3\n")
    monkeypatch.setattr(sys, "argv", ["run_uni.py", str(path)])
    run_uni.main()
    out = capsys.readouterr().out
    assert "RESULTADOS PARA SEMENTE: 170" in out
    assert "RESULTADOS PARA SEMENTE: 171" in out
    saved = json.loads((tmp_path / "modelo.results.json").read_text())
    assert set(saved) == {"seed_170", "seed_171"}
    assert saved["seed_171"]["valores"] == MarsagliaGenerator(seed=171).draw(3)


def test_main_without_arguments(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["run_uni.py"])
    with pytest.raises(SystemExit) as exc:
        run_uni.main()
    assert exc.value.code == 1
    assert "Uso:" in capsys.readouterr().out
