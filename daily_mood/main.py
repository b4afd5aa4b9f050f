import sys
from typing import List, Optional

from daily_mood import config
from daily_mood.core import configure_logging, log_error, log_info
from daily_mood.pipeline import PipelineOptions, run_daily_mood
from daily_mood.spotify import SpotifyAuthError


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entrypoint. Returns the process exit status.

    Flags:
      --dry-run  run the pipeline without writing the mood file
      --verbose  DEBUG logging
    """
    if argv is None:
        argv = sys.argv[1:]

    configure_logging("DEBUG" if "--verbose" in argv else config.LOG_LEVEL)

    # 0) Config check, before any network call
    try:
        config.require_valid_config()
    except config.ConfigError as e:
        if e.missing:
            log_error("Missing credentials!")
            log_error("Please set the following variables in the .env file:")
            for name in e.missing:
                log_error(f"  - {name}")
        for name in e.invalid:
            log_error(f"Invalid value for {name} (expected a positive integer)")
        return 1

    opts = PipelineOptions(write_output="--dry-run" not in argv)

    try:
        result = run_daily_mood(opts)
    except SpotifyAuthError as e:
        log_error(f"Aborting: {e}")
        return 1

    if result is None:
        log_info("No mood file written.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
