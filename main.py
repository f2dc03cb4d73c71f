# main.py
import sys

from pydantic import ValidationError

from ride_share.app.build import build
from ride_share.io.config import load_scenario


def run(argv: list[str]) -> int:
    # optional scenario file; otherwise the built-in demo
    try:
        cfg = load_scenario(argv[0]) if argv else None
    except ValidationError as exc:
        print(f"invalid scenario: {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"cannot read scenario: {exc}", file=sys.stderr)
        return 1

    app = build(cfg)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(run(sys.argv[1:]))
