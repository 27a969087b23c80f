# SPDX-License-Identifier: MIT

import atexit

from flightboard.repository.configuration import CONFIGURATION_REPO


def flush_and_sync() -> None:
    # Flight changes are kept in memory only, the configuration is the one
    # thing written back
    CONFIGURATION_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
