"""Haunted wasteland: walk a left/right network of named nodes."""

from __future__ import annotations

import argparse
import math
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from itertools import cycle
from pathlib import Path

_NODE = re.compile(r"([0-9A-Z]{3}) = \(([0-9A-Z]{3}), ([0-9A-Z]{3})\)")


def _ends_in_z(node: str) -> bool:
    return node.endswith("Z")


@dataclass(frozen=True)
class Network:
    """Repeating left/right instructions and each node's two neighbours."""

    instructions: str
    nodes: dict[str, tuple[str, str]] = field(default_factory=dict)

    def steps(self, start: str, is_end: Callable[[str], bool]) -> int:
        """Steps taken from ``start`` until a node satisfying ``is_end`` is entered."""
        node = start
        seen: set[tuple[str, int]] = set()
        for count, (index, direction) in enumerate(
            cycle(enumerate(self.instructions)), start=1
        ):
            state = (node, index)
            if state in seen:
                raise ValueError(f"walk from {start!r} never reaches an end node")
            seen.add(state)
            try:
                left, right = self.nodes[node]
            except KeyError as error:
                raise ValueError(f"unknown node: {node!r}") from error
            node = left if direction == "L" else right
            if is_end(node):
                return count
        raise ValueError("no instructions to follow")


def parse_network(text: str) -> Network:
    """Parse the instruction line followed by ``AAA = (BBB, CCC)`` lines."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty network")
    nodes: dict[str, tuple[str, str]] = {}
    for line in lines[1:]:
        if not line.strip():
            continue
        match = _NODE.fullmatch(line.strip())
        if match is None:
            raise ValueError(f"malformed node: {line!r}")
        name, left, right = match.groups()
        nodes[name] = (left, right)
    return Network(lines[0].strip(), nodes)


def steps_to_zzz(text: str) -> int:
    """Steps from ``AAA`` until a node whose name ends in ``Z`` is reached."""
    return parse_network(text).steps("AAA", _ends_in_z)


def ghost_steps(text: str) -> int:
    """Steps until every walk from a node ending in ``A`` stands on one ending in ``Z``."""
    network = parse_network(text)
    starts = [name for name in network.nodes if name.endswith("A")]
    return math.lcm(*(network.steps(start, _ends_in_z) for start in starts))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count steps through the network.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(steps_to_zzz(text))
    print(ghost_steps(text))


if __name__ == "__main__":
    main()