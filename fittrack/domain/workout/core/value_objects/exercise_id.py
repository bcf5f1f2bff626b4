"""Exercise id generation."""

import itertools
import time
from uuid import uuid4


class ExerciseIdGenerator:
    """Generate exercise ids that never repeat within a session.

    Format: ``ex_<epoch ms>_<sequence>_<random hex>``. The per-generator
    sequence guarantees uniqueness even when the clock does not advance;
    the random part keeps ids from separate sessions apart.
    """

    def __init__(self) -> None:
        self._sequence = itertools.count(1)

    def generate(self) -> str:
        millis = time.time_ns() // 1_000_000
        return f"ex_{millis}_{next(self._sequence)}_{uuid4().hex[:9]}"
