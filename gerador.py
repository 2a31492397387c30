from typing import List, Tuple

TABLE_SIZE = 97

#constantes publicadas (Marsaglia, Zaman & Tsang 1990)
CARRY_INITIAL = 362436.0 / 16777216.0
CARRY_DECREMENT = 7654321.0 / 16777216.0
CARRY_MODULUS = 16777213.0 / 16777216.0

START_I = 97
START_J = 33

IJ_MAX = 31328
KL_MAX = 30081
MAX_SEED = IJ_MAX * (KL_MAX + 1) + KL_MAX


class UninitializedError(RuntimeError):
    """Gerador usado antes de initialize()."""


def split_seed(seed: int) -> Tuple[int, int, int, int]:
    """Divide uma semente inteira nas quatro sub-sementes (i, j, k, l).

    Sementes fora de [0, MAX_SEED] são dobradas para dentro do intervalo
    pelo módulo, então qualquer inteiro é aceito.
    """
    seed = int(seed) % (MAX_SEED + 1)
    ij = seed // (KL_MAX + 1)
    kl = seed - (KL_MAX + 1) * ij
    i = (ij // 177) % 177 + 2
    j = ij % 177 + 2
    k = (kl // 169) % 178 + 1
    l = kl % 169
    return i, j, k, l


def seed_from_pair(ij: int, kl: int) -> int:
    #interface clássica de duas sementes (James, 1990)
    if not 0 <= ij <= IJ_MAX:
        raise ValueError(f"ij = {ij} fora do intervalo [0, {IJ_MAX}]")
    if not 0 <= kl <= KL_MAX:
        raise ValueError(f"kl = {kl} fora do intervalo [0, {KL_MAX}]")
    return ij * (KL_MAX + 1) + kl


class MarsagliaGenerator:
    """Universal Random Number Generator de Marsaglia.

    Combina um gerador defasado de subtração sobre uma tabela de 97
    valores com uma sequência aritmética de correção (carry). Produz
    valores uniformes em [0, 1), sempre a mesma sequência para a mesma
    semente.
    """

    def __init__(self, seed=None):
        #posição 0 não é usada, os cursores vão de 1 a 97
        self.table: List[float] = [0.0] * (TABLE_SIZE + 1)
        self.index_i = 0
        self.index_j = 0
        self.carry = 0.0
        self.carry_decrement = 0.0
        self.carry_modulus = 0.0
        self.initialized = False
        if seed is not None:
            self.initialize(seed)

    def initialize(self, seed: int):
        self.start(*split_seed(seed))

    def start(self, i: int, j: int, k: int, l: int):
        """Preenche a tabela a partir das quatro sub-sementes."""
        for name, value in (('i', i), ('j', j), ('k', k)):
            if not 1 <= value <= 178:
                raise ValueError(f"{name} = {value} fora do intervalo [1, 178]")
        if not 0 <= l <= 168:
            raise ValueError(f"l = {l} fora do intervalo [0, 168]")
        if i == 1 and j == 1 and k == 1:
            raise ValueError("1 1 1 não é permitido para as três primeiras sementes")

        for slot in range(1, TABLE_SIZE + 1):
            s = 0.0
            t = 0.5
            for _ in range(24):
                m = ((i * j % 179) * k) % 179
                i, j, k = j, k, m
                l = (53 * l + 1) % 169
                if (l * m) % 64 >= 32:
                    s += t
                t *= 0.5
            self.table[slot] = s

        self.carry = CARRY_INITIAL
        self.carry_decrement = CARRY_DECREMENT
        self.carry_modulus = CARRY_MODULUS
        self.index_i = START_I
        self.index_j = START_J
        self.initialized = True

    def next_uniform(self) -> float:
        #intervalo [0,1)
        if not self.initialized:
            raise UninitializedError("Gerador não inicializado, chame initialize(seed) antes.")

        uni = self.table[self.index_i] - self.table[self.index_j]
        if uni < 0.0:
            uni += 1.0
        self.table[self.index_i] = uni

        self.index_i -= 1
        if self.index_i < 1:
            self.index_i = TABLE_SIZE
        self.index_j -= 1
        if self.index_j < 1:
            self.index_j = TABLE_SIZE

        self.carry -= self.carry_decrement
        if self.carry < 0.0:
            self.carry += self.carry_modulus

        uni -= self.carry
        if uni < 0.0:
            uni += 1.0
        return uni

    def draw(self, n: int) -> List[float]:
        if n < 0:
            raise ValueError(f"Quantidade inválida de valores: {n}")
        return [self.next_uniform() for _ in range(n)]

    def skip(self, n: int):
        if n < 0:
            raise ValueError(f"Quantidade inválida de valores: {n}")
        for _ in range(n):
            self.next_uniform()

    def __iter__(self):
        return self

    def __next__(self) -> float:
        return self.next_uniform()
