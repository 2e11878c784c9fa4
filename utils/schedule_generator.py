# utils/schedule_generator.py
import random
from pathlib import Path
from typing import List, Optional, Union


def generate_schedule_input(
        num_objects: int,
        num_transactions: int,
        num_schedules: int,
        ops_per_schedule: int,
        commit_probability: float = 0.15,
        seed: Optional[int] = None,
) -> List[str]:
    """
    Generates a random input dataset: the three declaration lines followed by
    one schedule line per requested schedule.

    Args:
        num_objects: Number of data objects, named A, B, ... (then O27, O28, ...).
        num_transactions: Number of transactions t1..tN.
        num_schedules: Number of schedule lines, labelled S_1..S_N.
        ops_per_schedule: Number of operations per schedule, commits included.
        commit_probability: Chance that any single operation is a commit marker.
        seed: Seed for a reproducible dataset.

    Returns:
        The input lines, without terminators.
    """
    if num_objects < 1 or num_transactions < 1:
        raise ValueError("At least one object and one transaction are required.")
    if not 0.0 <= commit_probability <= 1.0:
        raise ValueError("commit_probability must be between 0 and 1.")

    rng = random.Random(seed)

    objects = [
        chr(ord("A") + i) if i < 26 else f"O{i + 1}"
        for i in range(num_objects)
    ]
    transaction_ids = list(range(1, num_transactions + 1))

    # Timestamps are pairwise distinct
    timestamps = rng.sample(range(1, num_transactions * 3 + 1), num_transactions)

    lines = [
        ", ".join(objects) + ";",
        ", ".join(f"t{tid}" for tid in transaction_ids) + ";",
        ", ".join(str(ts) for ts in timestamps) + ";",
    ]

    for s in range(1, num_schedules + 1):
        ops = []
        for _ in range(ops_per_schedule):
            if rng.random() < commit_probability:
                ops.append("c")
                continue
            kind = rng.choice("rw")
            ops.append(f"{kind}{rng.choice(transaction_ids)}({rng.choice(objects)})")
        lines.append(f"S_{s}-" + " ".join(ops))

    return lines


def write_schedule_input(filename: Union[str, Path], **kwargs) -> Path:
    """
    Writes a generated dataset to ``filename``. Keyword arguments are passed
    to generate_schedule_input.
    """
    path = Path(filename)
    lines = generate_schedule_input(**kwargs)
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
    return path
