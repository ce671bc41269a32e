#!/usr/bin/env python3
"""Record List Demo Driver

Runs a random ordering/value workload against an in-memory master
reference and prints the events a WatchSession derives from it.

Usage:
    python demo/record_list_demo.py --initial-keys 5 --steps 40 --seed 3
"""

from __future__ import annotations

import argparse
import logging
import random
from collections import Counter

from live_records import (
    EventKind,
    ListenerRegistry,
    MemoryReference,
    RecordListConfig,
    WatchSession,
)


def describe(snapshots) -> str:
    return "[" + ", ".join(f"{s.key}={s.value}" for s in snapshots) + "]"


def attach_printer(registry: ListenerRegistry, counters: Counter) -> None:
    """Print every event and count it by kind."""

    def printer(kind: EventKind):
        def show(*args):
            counters[kind.value] += 1
            if kind is EventKind.VALUE:
                print(f"  value       {describe(args[0])}")
            else:
                print(f"  {kind.value:<13} {args!r}")
        return show

    for kind in EventKind:
        registry.on(kind, printer(kind))


def run_demo(args: argparse.Namespace) -> None:
    """Run the demo workload."""
    rng = random.Random(args.seed)
    ref = MemoryReference(args.path)
    registry = ListenerRegistry()
    counters: Counter = Counter()
    attach_printer(registry, counters)

    cfg = RecordListConfig(emit_values_on_teardown=args.teardown_values)
    keys: list[str] = []

    with WatchSession(ref, registry, cfg) as session:
        print(f"Initial batch of {args.initial_keys} keys from {ref}")
        prev = None
        for i in range(args.initial_keys):
            key = f"rec{i}"
            ref.emit_added(key, prev)
            keys.append(key)
            prev = key
        ref.emit_loaded()

        # First values arrive in arbitrary order
        for key in rng.sample(keys, len(keys)):
            ref.child(key).push(0)

        print(f"Running {args.steps} random steps")
        for step in range(1, args.steps + 1):
            op = rng.choice(["add", "update", "update", "remove", "move"])
            if op == "add" or not keys:
                key = f"rec{args.initial_keys + step}"
                ref.emit_added(key, rng.choice(keys) if keys else None)
                ref.child(key).push(step)
                keys.append(key)
            elif op == "update":
                ref.child(rng.choice(keys)).push(step)
            elif op == "remove":
                ref.emit_removed(keys.pop(rng.randrange(len(keys))))
            else:
                ref.emit_moved(rng.choice(keys), rng.choice([None, *keys]))

        print(f"Final order: {session.records.keys()}")
        print("Stopping session")

    print(f"Event counts: {dict(counters)}")


def main() -> None:
    """Parse arguments and run demo."""
    p = argparse.ArgumentParser(description="Record list demo driver")
    p.add_argument("--path", default="/demo/records", help="Master reference path")
    p.add_argument("--initial-keys", type=int, default=5, help="Keys in the initial batch")
    p.add_argument("--steps", type=int, default=20, help="Random steps after load")
    p.add_argument("--seed", type=int, default=None, help="Random seed")
    p.add_argument(
        "--teardown-values",
        action="store_true",
        help="Emit aggregate value events while stopping",
    )
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = p.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_demo(args)


if __name__ == "__main__":
    main()
