from __future__ import annotations

import sys
from typing import BinaryIO, Optional, Sequence

from .cli import parse_args
from .config import build_config
from .dictionary import load_dictionary
from .errors import DictsubError, OutOfMemoryError
from .logging_utils import RichLogger
from .pipeline import SubstitutionPipeline


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> int:
    args = parse_args(argv)
    source = stdin if stdin is not None else sys.stdin.buffer
    sink = stdout if stdout is not None else sys.stdout.buffer

    logger = RichLogger()
    try:
        config = build_config(args)
        logger = RichLogger(log_file=config.log_file, quiet=config.quiet)

        dictionary = load_dictionary(config.dictionary_path)
        if config.verbose:
            logger.log_panel(
                f"Loaded {len(dictionary)} words from {config.dictionary_path}",
                "INFO",
                "cyan",
            )
            logger.log_summary(
                "Dictionary",
                {
                    "entries": len(dictionary),
                    "capacity": dictionary.capacity,
                    "load factor": f"{dictionary.load_factor:.2f}",
                },
            )

        pipeline = SubstitutionPipeline(config=config, logger=logger, dictionary=dictionary)
        return pipeline.run(source, sink)
    except DictsubError as error:
        logger.log_error(error)
        return error.exit_code
    except MemoryError:
        error = OutOfMemoryError("out of memory")
        logger.log_error(error)
        return error.exit_code


if __name__ == "__main__":
    sys.exit(main())
