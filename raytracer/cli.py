"""Command-line entry point: render a scene file to standard output."""

import sys

from .builder import Builder
from .errors import RaytracerError
from .sceneconfig import ConfigError, SettingNotFoundError

EXIT_FAILURE = 84


def main(argv=None):
    """Run the renderer and return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: raytracer <config_file>", file=sys.stderr)
        return EXIT_FAILURE
    if args[0] in ("-h", "--help"):
        print("Usage: ./raytracer <SCENE_FILE>")
        print("  SCENE_FILE: scene configuration")
        return 0
    try:
        Builder(args[0]).load_all()
    except OSError:
        print("I/O error while reading file.", file=sys.stderr)
        return EXIT_FAILURE
    except SettingNotFoundError as exc:
        print(f"Setting not found: {exc.path}", file=sys.stderr)
        return EXIT_FAILURE
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    except RaytracerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    return 0


if __name__ == "__main__":
    sys.exit(main())