# SPDX-License-Identifier: MIT

from daybound.cleanup import register_cleanup
from daybound.initialize import initialize
from daybound.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
