from __future__ import annotations

from _infra import LineFile, banner, run

from cursors import Log, TraceEvent, cursor_of, traced


def main() -> None:
    banner("03_tee_trace: tee, zip and closing")

    log = Log[TraceEvent]()
    source = traced(cursor_of(["A", "B", "C"]), log, label="letters")
    left, right = source.tee()
    for pair in left.zip(right.map(lambda x: x + x)):
        print(pair)
    print(f"upstream advanced {sum(1 for e in log if e.kind == 'advance')} times")

    handle = LineFile("notes.txt", ["todo: a", "done: b", "todo: c"])
    found = cursor_of(handle).some(lambda line: line.startswith("done"))
    print(f"found={found} closed={handle.closed}")


if __name__ == "__main__":
    run(main)
