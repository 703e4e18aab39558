"""Render an include trace of ``gcc -H`` as a Graphviz DOT graph."""

from __future__ import annotations

import sys
from typing import Sequence

from snplabs.depdata import DependencyData, DependencyError, FileEntry, read_all

_USAGE = "usage: dep2dot file.c <file.dep >file.dot   # from gcc -H ... file.c ... 2>file.dep\n"


def node_name(entry: FileEntry) -> str:
    """The quoted DOT node name, unique per directory and base name."""
    return f'"{entry.name} (cluster_c{entry.dir})"'


def _dependencies(
    files: Sequence[FileEntry], curr: int, edges: list[tuple[FileEntry, FileEntry]]
) -> int:
    level = files[curr].level
    index = curr + 1
    while index < len(files) and files[index].level > level:
        if files[index].level == level + 1:
            edges.append((files[curr], files[index]))
            index = _dependencies(files, index, edges)
        else:
            index += 1
    return index


def render_dot(data: DependencyData) -> str:
    """Return the DOT text for the given dependency data."""
    out = ["digraph dep {", "  node [shape=box]"]
    out += [f'  {node_name(entry)} [label="{entry.name}"];' for entry in data.files]
    for index, name in enumerate(data.dirs):
        style = "style=filled; color=lightgrey;" if name.startswith("/usr/") else "color=black;"
        out.append(f"  subgraph cluster_c{index} {{")
        out.append(f'    label="{name}"; {style}')
        out += [f"    {node_name(entry)};" for entry in data.files if entry.dir == index]
        out.append("  }")
    edges: list[tuple[FileEntry, FileEntry]] = []
    curr = 0
    while curr < len(data.files):
        curr = _dependencies(data.files, curr, edges)
    out += [f"  {node_name(parent)} -> {node_name(child)};" for parent, child in edges]
    out.append("}")
    return "\n".join(out) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Read a trace from standard input and write the DOT graph of the named root file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stderr.write(f"ERROR: missing arguments\n{_USAGE}\n")
        return 1
    try:
        data = read_all(args[0], sys.stdin)
    except DependencyError as error:
        sys.stderr.write(f"ERROR: {error}\n")
        return 1
    sys.stdout.write(render_dot(data))
    return 0


if __name__ == "__main__":
    sys.exit(main())