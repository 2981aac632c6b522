from __future__ import annotations

from typing import BinaryIO

from .config import AppConfig
from .engine import SubstitutionResult, substitute
from .logging_utils import RichLogger
from .table import Dictionary

EXIT_ALL_MATCHED = 0
EXIT_UNMATCHED = 1


class SubstitutionPipeline:
    def __init__(self, config: AppConfig, logger: RichLogger, dictionary: Dictionary) -> None:
        self.config = config
        self.logger = logger
        self.dictionary = dictionary
        self.result: SubstitutionResult | None = None

    def run(self, source: BinaryIO, sink: BinaryIO) -> int:
        """Substitute ``source`` into ``sink`` and return the exit status.

        The sink is flushed even when a fault aborts the stream, so output
        produced before the fault is kept.
        """

        try:
            self.result = substitute(source, sink, self.dictionary, read_size=self.config.read_size)
        finally:
            sink.flush()

        if self.config.verbose:
            self.logger.log_summary("Substitution", self.result.to_dict())
        if self.result.had_unmatched:
            return EXIT_UNMATCHED
        return EXIT_ALL_MATCHED
