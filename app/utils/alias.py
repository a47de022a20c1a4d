import random
import string
from typing import Optional

# 26 lowercase + 26 uppercase + 10 digits
ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits

# Seeded once per process from the OS entropy pool
_rng = random.SystemRandom()


def new_random_string(size: int, rng: Optional[random.Random] = None) -> str:
    """Generate a random alias of exactly ``size`` alphanumeric characters."""
    if size <= 0:
        raise ValueError("size must be positive")
    source = rng or _rng
    return ''.join(source.choice(ALPHABET) for _ in range(size))
