"""Core aggregation functions."""

import asyncio
import logging

from fileprops.config import FilePropsConfig, load_config
from fileprops.errors import MandatorySourceFailure
from fileprops.models import Row
from fileprops.sources import BaseSource, SourceOutcome, get_enabled_sources

logger = logging.getLogger(__name__)


class PropertyAggregator:
    """Runs attribute sources in order and concatenates their rows.

    Sources run one after another; each finishes (or fails) before the next
    starts. Failures of optional sources are logged and dropped, failures of
    mandatory sources raise ``MandatorySourceFailure``.
    """

    def __init__(self, sources: list[BaseSource] | None = None):
        self.sources = sources

    async def aggregate(self, path: str, config: FilePropsConfig) -> list[Row]:
        """Collect the property rows for ``path``.

        Args:
            path: Path to the file
            config: Configuration for this run

        Returns:
            Rows in display order

        Raises:
            MandatorySourceFailure: If a mandatory source fails
        """
        sources = self.sources if self.sources is not None else get_enabled_sources(config)

        rows: list[Row] = []
        for source in sources:
            outcome = await source.run(path, config)
            rows.extend(self._accept(source, outcome))
        return rows

    def _accept(self, source: BaseSource, outcome: SourceOutcome) -> list[Row]:
        if outcome.ok:
            logger.debug("%s produced %d rows", outcome.source, len(outcome.rows))
            return outcome.rows
        if source.mandatory:
            raise MandatorySourceFailure(outcome.source, str(outcome.error)) from outcome.error
        logger.warning("%s skipped: %s", outcome.source, outcome.error)
        return []


async def aggregate(path: str, config: FilePropsConfig) -> list[Row]:
    """Collect the property rows for ``path`` with the sources ``config`` enables."""
    return await PropertyAggregator().aggregate(path, config)


def aggregate_file(path: str, config: FilePropsConfig | None = None) -> list[Row]:
    """Synchronous ``aggregate``; loads a fresh configuration when none is given."""
    if config is None:
        config = load_config()
    return asyncio.run(aggregate(path, config))
