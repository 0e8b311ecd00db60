"""Base attribute source class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from fileprops.config import FilePropsConfig
from fileprops.errors import FilePropsError
from fileprops.models import Row


class SourceOutcome(BaseModel):
    """Result of running one source: its rows, or the error that stopped it."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    source: str
    rows: list[Row] = Field(default_factory=list)
    error: FilePropsError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BaseSource(ABC):
    """Abstract base class for attribute sources.

    A source turns one path into zero or more rows. Sources never decide
    whether their own failure is fatal; they report it through
    ``SourceOutcome`` and the aggregator applies the ``mandatory`` flag.

    Attributes:
        name: Human-readable name of the source
        mandatory: Whether a failure aborts the whole aggregation
    """

    name: ClassVar[str] = "base"
    mandatory: ClassVar[bool] = False

    @classmethod
    def is_enabled(cls, config: FilePropsConfig) -> bool:
        """Check whether the configuration asks for this source."""
        return True

    @classmethod
    def is_available(cls, config: FilePropsConfig) -> bool:
        """Check if the tools this source needs are installed."""
        return True

    @abstractmethod
    async def collect(self, path: str, config: FilePropsConfig) -> list[Row]:
        """Produce the rows for ``path``.

        Raises:
            FilePropsError: if the source cannot produce its rows
        """
        pass

    async def run(self, path: str, config: FilePropsConfig) -> SourceOutcome:
        """Run ``collect`` and capture its failure as an outcome."""
        try:
            rows = await self.collect(path, config)
        except FilePropsError as e:
            return SourceOutcome(source=self.name, error=e)
        return SourceOutcome(source=self.name, rows=rows)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, mandatory={self.mandatory})"
