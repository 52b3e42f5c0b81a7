#!/usr/bin/env python3
"""
Demo: Oxford-comma joins.

Shows every built-in conjunction, a custom one, the lazy wrappers,
and a join driven by a YAML config.
"""

import sys

from oxford_join import (
    Conjunction,
    JoinFmt,
    OxfordJoinFmt,
    config_from_yaml,
    join,
)
from oxford_join.conjunction import FIXED_CONJUNCTIONS


FRUIT = ["Apples", "Bananas", "Carrots", "Dates"]


def main():
    print("=" * 80)
    print("OXFORD JOIN DEMO")
    print("=" * 80)

    for conjunction in FIXED_CONJUNCTIONS:
        print(f"\n{conjunction.kind.name}:")
        print("-" * 80)
        for size in range(len(FRUIT) + 1):
            print(f"  {size}: {join(FRUIT[:size], conjunction)!r}")

    print("\nCUSTOM (plus):")
    print("-" * 80)
    print(f"  {join(FRUIT, Conjunction.from_text('plus'))!r}")

    print("\nLAZY:")
    print("-" * 80)
    print(f"  numbers: {JoinFmt(iter(['one', 'two', 'three']), ' | ')}")
    OxfordJoinFmt.nor(FRUIT).write_to(sys.stdout)
    print()

    print("\nCONFIG:")
    print("-" * 80)
    cfg = config_from_yaml("conjunction: and_or\nseparator: ' / '\n")
    print(f"  {cfg.join(FRUIT)}")
    print(f"  {cfg.join_fmt(FRUIT)}")

    print("\n" + "=" * 80)


if __name__ == "__main__":
    main()
