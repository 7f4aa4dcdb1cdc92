# SPDX-License-Identifier: MIT

from weekgrid.cleanup import register_cleanup
from weekgrid.initialize import initialize
from weekgrid.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
