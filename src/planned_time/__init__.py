# SPDX-License-Identifier: MIT

from planned_time.initialize import initialize
from planned_time.terminal.app import run


def main() -> None:
    initialize()
    run()


if __name__ == "__main__":
    main()
