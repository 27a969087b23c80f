# SPDX-License-Identifier: MIT

from flightboard.cleanup import register_cleanup
from flightboard.initialize import initialize
from flightboard.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
