from typing import Dict
from gerador import MarsagliaGenerator, seed_from_pair

# ---------------------------
#  Fonte de Aleatórios
# ---------------------------

class UniformSource:
    def __init__(self, config: Dict):
        if 'rndnumbers' in config and not 'seeds' in config:
            self.numbers = iter(config['rndnumbers'])
            self.source = 'list'
            self.generator = None
        else:
            if 'ij' in config and 'kl' in config:
                seed = seed_from_pair(int(config['ij']), int(config['kl']))
            else:
                seed = config.get('seed', 1)
            self.generator = MarsagliaGenerator(seed=seed)
            self.source = 'uni'
        self.used = 0

    def u(self) -> float:
        #retorna o próximo random U(0,1)
        if self.source == 'list':
            try:
                value = float(next(self.numbers))
            except StopIteration:
                raise RuntimeError("Lista de números aleatórios esgotada.")
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Número fora do intervalo [0,1): {value}")
        else:
            value = self.generator.next_uniform()
        self.used += 1
        return value

    def skip(self, n: int):
        for _ in range(n):
            self.u()

    def uniform(self, a: float, b: float) -> float:
        #escala afim de U(0,1) para [a,b)
        return a + (b - a) * self.u()
