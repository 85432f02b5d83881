# ieee754/cli/main.py
from __future__ import annotations

from typing import Optional

from ieee754.errors import Ieee754Error

from ieee754.cli.args import parse_args, resolve_config
from ieee754.cli.commands import (
    cmd_decode,
    cmd_encode,
    cmd_inspect,
    configure_logging,
)


def main(argv: Optional[list[str]] = None) -> int:
    try:
        args = parse_args(argv)
        configure_logging(args.log_level)
        config = resolve_config(args)

        if args.cmd == "encode":
            return cmd_encode(args, config)
        if args.cmd == "decode":
            return cmd_decode(args, config)
        if args.cmd == "inspect":
            return cmd_inspect(args, config)

        return 2
    except Ieee754Error as e:
        print(f"ERROR: {e.message}")
        if e.hint:
            print(f"Hint: {e.hint}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
