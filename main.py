"""Entry point for Meteor Dodge."""

import sys

from meteordodge.config import settings
from meteordodge.simulation.loop import run


def main() -> None:
    runtime_settings = settings.load_runtime_settings(sys.argv[1:])
    settings.apply_runtime_settings(runtime_settings)
    run(runtime_settings)


if __name__ == "__main__":
    main()
