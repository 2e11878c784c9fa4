import argparse
import sys
from pathlib import Path

# Make the project packages importable when run from a plain checkout
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from utils.schedule_generator import generate_schedule_input


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Generate a randomized input file for the timestamp-ordering validator."
    )
    parser.add_argument("--objects", type=int, default=4, help="Number of data objects.")
    parser.add_argument("--transactions", type=int, default=4, help="Number of transactions.")
    parser.add_argument(
        "-s",
        "--schedules",
        type=int,
        required=True,
        help="Number of schedule lines to generate.",
    )
    parser.add_argument(
        "--ops", type=int, default=10, help="Operations per schedule, commits included."
    )
    parser.add_argument(
        "--commit-probability",
        type=float,
        default=0.15,
        help="Chance that an operation is a commit marker.",
    )
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible file.")
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Path to the output file. If not specified, prints to stdout.",
    )
    args = parser.parse_args()

    if args.schedules <= 0:
        print("Error: Number of schedules must be a positive integer.")
    else:
        lines = generate_schedule_input(
            num_objects=args.objects,
            num_transactions=args.transactions,
            num_schedules=args.schedules,
            ops_per_schedule=args.ops,
            commit_probability=args.commit_probability,
            seed=args.seed,
        )
        data = "\n".join(lines) + "\n"
        if args.output:
            try:
                with open(args.output, "w") as f:
                    f.write(data)
                print(f"{args.schedules} schedules successfully written to {args.output}")
            except IOError as e:
                print(f"Error writing to file {args.output}: {e}")
        else:
            print(data, end="")
