import time
import random
from jazzvoicing.constants import VOICING_TABLE
from jazzvoicing.engine import voice_progression

_ROOTS = ["C", "Db", "D", "Eb", "E", "F", "F#", "G", "Ab", "A", "Bb", "B"]

def run_benchmark():
    # Setup
    random.seed(42)
    qualities = list(VOICING_TABLE)
    lines = []
    for _ in range(500):
        chords = [random.choice(_ROOTS) + random.choice(qualities) for _ in range(16)]
        lines.append(", ".join(chords))
    text = "\n".join(lines)

    # Pre-warm
    voice_progression(lines[0])

    # Benchmark
    start_time = time.perf_counter()
    rows = voice_progression(text)
    end_time = time.perf_counter()

    duration = end_time - start_time
    print(f"Voiced {sum(len(r) for r in rows)} chords in {len(rows)} lines")
    print(f"Benchmark duration: {duration:.4f} seconds")

if __name__ == '__main__':
    run_benchmark()
