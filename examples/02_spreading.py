from __future__ import annotations

from _infra import banner, run

from cursors import atom, cursor_of


def main() -> None:
    banner("02_spreading: concat and flatten")

    a = ["A", "B", "C"]
    print(list(cursor_of(a).concat(a, cursor_of(a), iter(a))))
    print(list(cursor_of(a).concat("XYZ", atom(["D", "E", "F"]))))

    print(list(cursor_of([["A"], [["B"]], ["C"]]).flatten()))  # ['A', 'B', 'C']

    flat_mapped = cursor_of(a).map(lambda v: [v, v.lower(), [v]]).flatten(1)
    print(list(flat_mapped))


if __name__ == "__main__":
    run(main)
