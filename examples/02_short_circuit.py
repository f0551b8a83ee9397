from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from _infra import banner, close_file, open_file, read_file

from fallible import Result, error, ok, run_sequence, short_circuit


@short_circuit
def load(path: Path):
    handle = yield open_file(path)
    contents = yield read_file(handle)
    yield close_file(handle)
    return contents


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    banner("02_short_circuit: run_sequence + @short_circuit")

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "file.txt"
        path.write_text("hello world")

        print(load(path))                    # Ok(hello)
        print(load(Path(tmp) / "nope.txt"))  # Error(I'm looking for ...)

    def steps():
        yield ok("a")
        yield error("boom")
        yield ok("c")  # never requested
        return "done"

    result: Result[str] = run_sequence(steps)
    print(result)  # Error(boom)


if __name__ == "__main__":
    main()
