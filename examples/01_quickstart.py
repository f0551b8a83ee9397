from __future__ import annotations

import tempfile
from pathlib import Path

from _infra import banner, close_file, open_file, read_file

from fallible import ErrorSlot, describe_error, lift as L


def main() -> None:
    banner("01_quickstart: ok / error / unwrap")

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "file.txt"
        path.write_text("hello world")

        # Pair form: guard on the error, never on the value
        handle, err = L.down.unwrap(open_file(path))
        if err is not None:
            print(f"error: {describe_error(err)}")
            return

        # Slot form
        slot = ErrorSlot()
        contents = read_file(handle).try_(slot)
        if slot:
            print(f"error: {describe_error(slot.error)}")
            return

        close_file(handle).try_(slot)
        print(contents)

    _, err = L.down.unwrap(open_file("missing.txt"))
    print(f"error: {describe_error(err)}")


if __name__ == "__main__":
    main()
