#!/usr/bin/env python3

import os
import sys

from uperm.main import main

DEFAULT_CONFIG = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.yaml")


def build_argv(argv: list[str]) -> list[str]:
    """Fall back to the config.yaml next to this script when no arguments are given."""
    return argv or ["--config", DEFAULT_CONFIG]


if __name__ == "__main__":
    sys.exit(main(build_argv(sys.argv[1:])))
