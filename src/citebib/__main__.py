"""Main entry point for the bibliography builder."""
import logging
import sys
from typing import NoReturn

from .bibliography import BibliographyBuilder
from .config import Config
from .errors import BibliographyError
from .utils.logging_setup import setup_logging


def main() -> NoReturn:
    """Main program entry point."""
    config = Config()
    setup_logging(config.LOG_LEVEL, config.LOG_DIR or None)

    builder = BibliographyBuilder(config)
    try:
        builder.run()
    except BibliographyError as e:
        logging.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nProgram terminated by user.", file=sys.stderr)
        sys.exit(130)
    finally:
        builder.api.close()

    sys.exit(0)


if __name__ == "__main__":
    main()
