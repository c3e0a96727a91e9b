# python -m apps.extensions.move_payment_customization < input.json
import sys

from .run import run_json


def main() -> int:
    sys.stdout.write(run_json(sys.stdin.read()))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
