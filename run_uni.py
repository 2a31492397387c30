import sys
import json
from pathlib import Path
from typing import Dict, List
from fontes import UniformSource

def load_config(path: str) -> dict:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    lines = [line for line in p.read_text().splitlines() if not line.strip().startswith(('#', '!'))]

    try:
        import yaml
        return yaml.safe_load("\n".join(lines)) or {}
    except ImportError:
        print("A biblioteca PyYAML não está instalada. Tente 'pip install pyyaml'.")
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"Erro ao parsear o arquivo YAML: {e}")
        sys.exit(1)

def frequencies(values: List[float], bins: int) -> List[float]:
    #frequência relativa de cada faixa de largura 1/bins
    counts = [0] * bins
    for v in values:
        counts[int(v * bins)] += 1
    return [c / len(values) if values else 0 for c in counts]

def run(config: Dict) -> Dict:
    count = int(config.get('count', 5))
    skip = int(config.get('skip', 0))
    bins = int(config.get('bins', 10))
    if count < 0 or skip < 0 or bins < 1:
        raise ValueError(f"Parâmetros inválidos: count={count}, skip={skip}, bins={bins}")

    rng = UniformSource(config)
    rng.skip(skip)
    values = [rng.u() for _ in range(count)]

    if rng.source == 'list':
        seed = None
    elif 'ij' in config and 'kl' in config:
        seed = f"{config['ij']}/{config['kl']}"
    else:
        seed = config.get('seed', 1)

    return {
        "semente": seed,
        "descartados": skip,
        "valores": values,
        "randoms_usados": rng.used,
        "media": sum(values) / count if count else None,
        "minimo": min(values) if values else None,
        "maximo": max(values) if values else None,
        "prob_faixa": frequencies(values, bins),
    }

def print_results(results: dict, seed: int = None):
    if seed is not None:
        print(f"\n--- RESULTADOS PARA SEMENTE: {seed} ---")

    print(f"Valores descartados: {results['descartados']}")
    print(f"Números aleatórios utilizados: {results['randoms_usados']}")
    for i, v in enumerate(results['valores'], start=1):
        print(f"  U[{i}] = {v!r}")

    if results['valores']:
        print(f"Média: {results['media']:.6f}  Mínimo: {results['minimo']:.6f}  Máximo: {results['maximo']:.6f}")
        print("  Frequência por faixa:")
        bins = len(results['prob_faixa'])
        for i, prob in enumerate(results['prob_faixa']):
            if prob > 0: # Apenas mostra faixas que ocorreram
                print(f"    [{i/bins:.2f}, {(i+1)/bins:.2f}) = {prob*100:.2f}%")

def main():
    if len(sys.argv) < 2:
        print("Uso: python run_uni.py <arquivo_modelo.yml>")
        sys.exit(1)

    config_path = sys.argv[1]
    config = load_config(config_path)

    if 'seeds' in config:
        all_results = {}
        for seed in config['seeds']:
            run_config = config.copy()
            run_config['seed'] = seed
            run_config.pop('ij', None)
            run_config.pop('kl', None)
            results = run(run_config)
            print_results(results, seed)
            all_results[f"seed_{seed}"] = results

        out_path = Path(config_path).with_suffix(".results.json")
        Path(out_path).write_text(json.dumps(all_results, indent=2))
        print(f"\nResultados de todas as sementes salvos em: {out_path}")

    else:
        results = run(config)
        print_results(results)

        out_path = Path(config_path).with_suffix(".result.json")
        Path(out_path).write_text(json.dumps(results, indent=2))
        print(f"\nResultados salvos em: {out_path}")

if __name__ == "__main__":
    main()
