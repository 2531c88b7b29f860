#!/usr/bin/env python3
import argparse
import logging
import random
import string
import sys
import time
from pathlib import Path
from typing import Callable

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from humandistance.common.config import settings
from humandistance.distance.engine import best_match, best_match_concurrent, calculate
from humandistance.keyboards.layouts import CustomLayoutBuilder, KeyboardLayout, Layout, get_layout

logger = logging.getLogger(__name__)


def random_text(length: int, rng: random.Random) -> str:
    return "".join(rng.choice(string.ascii_lowercase) for _ in range(length))


def with_transposition(text: str, rng: random.Random) -> str:
    if len(text) < 2:
        return text
    idx = rng.randrange(len(text) - 1)
    return text[:idx] + text[idx + 1] + text[idx] + text[idx + 2 :]


def time_call(fn: Callable[[], object], repeat: int) -> float:
    started = time.perf_counter()
    for _ in range(repeat):
        fn()
    return (time.perf_counter() - started) / repeat * 1e6


def custom_layout() -> Layout:
    return (
        CustomLayoutBuilder(name="custom-3row")
        .add_row("qwertyuiop", y=0, x_offset=0.3)
        .add_row("asdfghjkl", y=1, x_offset=0.5)
        .add_row("zxcvbnm", y=2, x_offset=1.1)
        .build()
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Time distance calculations across layouts and lengths.")
    parser.add_argument("--lengths", type=int, nargs="+", default=[4, 16, 64, 256])
    parser.add_argument("--repeat", type=int, default=20)
    parser.add_argument("--candidates", type=int, default=500)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level)
    rng = random.Random(args.seed)
    layouts = [get_layout(member) for member in KeyboardLayout] + [custom_layout()]

    print(f"{'case':<28}{'length':>8}{'us/op':>14}")
    for length in args.lengths:
        source = random_text(length, rng)
        target = random_text(length, rng)
        swapped = with_transposition(source, rng)
        repeat = max(1, args.repeat if length <= 64 else args.repeat // 10)

        for layout in layouts:
            elapsed = time_call(lambda: calculate(source, target, layout), repeat)
            print(f"{'calculate/' + layout.name:<28}{length:>8}{elapsed:>14.1f}")

        elapsed = time_call(lambda: calculate(source, swapped), repeat)
        print(f"{'calculate/transposed':<28}{length:>8}{elapsed:>14.1f}")

    query = random_text(8, rng)
    pool = [random_text(8, rng) for _ in range(args.candidates)]
    elapsed = time_call(lambda: best_match(query, pool, min_score=0.0), 1)
    print(f"{'best_match':<28}{len(pool):>8}{elapsed:>14.1f}")
    elapsed = time_call(lambda: best_match_concurrent(query, pool, min_score=0.0), 1)
    print(f"{'best_match_concurrent':<28}{len(pool):>8}{elapsed:>14.1f}")
    logger.info("benchmark complete lengths=%s candidates=%s", args.lengths, len(pool))


if __name__ == "__main__":
    main()
