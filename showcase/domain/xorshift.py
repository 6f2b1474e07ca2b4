# showcase/domain/xorshift.py
import math

MASK_32 = 0xFFFFFFFF

class XorShift32:
    """Seeded 32-bit xorshift generator.

    Every intermediate is masked to 32 bits so a given seed yields the same
    stream on any host, which is what keeps showcase layouts reproducible.
    """

    def __init__(self, seed: int):
        seed &= MASK_32
        # An all-zero state would only ever produce zeros
        self._state = seed if seed != 0 else 1

    @property
    def state(self) -> int:
        return self._state

    def next_float(self) -> float:
        """Advance the state and return it scaled to [0, 1]."""
        x = self._state
        x ^= (x << 13) & MASK_32
        x ^= x >> 17
        x ^= (x << 5) & MASK_32
        self._state = x & MASK_32
        return self._state / MASK_32

    def int_in_range(self, lo: int, hi: int) -> int:
        """Random integer in [lo, hi], both ends inclusive."""
        if hi < lo:
            raise ValueError(f"Invalid range: hi ({hi}) < lo ({lo})")
        value = lo + math.floor(self.next_float() * (hi - lo + 1))
        # next_float() hits exactly 1.0 for one state out of 2**32
        return min(value, hi)

    def jitter(self, base: float, amplitude: float) -> float:
        """Uniform noise in [base - amplitude, base + amplitude]."""
        return base + (self.next_float() * 2 - 1) * amplitude
