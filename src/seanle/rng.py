from dataclasses import dataclass

# glibc-style LCG constants, folded to 31 bits
A = 1103515245
C = 12345
MASK = 0x7FFFFFFF
SCALE = 0x80000000  # 2^31

def lcg_next(state: int) -> int:
    return (A * state + C) & MASK

@dataclass
class LCGRandom:
    """
    Seeded source for everything the generator draws.
    Python ints are unbounded, so the masked update is exact on every platform.
    """
    state: int

    def __post_init__(self) -> None:
        self.state &= MASK

    def next32(self) -> int:
        self.state = lcg_next(self.state)
        return self.state

    def next(self) -> float:
        return self.next32() / SCALE

    def range(self, lo: int, hi: int) -> int:
        """Inclusive on both ends."""
        assert hi >= lo
        return int(self.next() * (hi - lo + 1)) + lo

    def reseed(self, seed: int) -> None:
        self.state = seed & MASK
