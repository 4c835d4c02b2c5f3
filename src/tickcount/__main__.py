import sys
from typing import List, Optional

from tickcount.config import Config, ConfigError
from tickcount.logger import init_logging, log
from tickcount.module import TickCountServer


def main(argv: Optional[List[str]] = None) -> int:
    try:
        config = Config.from_args(argv)
    except ConfigError as e:
        print("tickcount: {}".format(e), file=sys.stderr)
        return 2

    init_logging(config.log_level)
    log.debug("config: {}".format(config.to_jsonish()))
    TickCountServer(config).serve()
    return 0


if __name__ == "__main__":
    sys.exit(main())
