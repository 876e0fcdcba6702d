"""Per-invocation state shared by the subcommands."""

from __future__ import annotations

from typing import Callable, Optional

from jiri.catalog import FieldCatalogCache
from jiri.config import Config, load_config
from jiri.formatter import Formatter
from jiri.logger import JiriLogger
from jiri.tracker import IssueTracker

TrackerFactory = Callable[[Config, JiriLogger], IssueTracker]


def default_tracker_factory(config: Config, logger: JiriLogger) -> IssueTracker:
    from jiri.providers.jira import JiraTracker

    return JiraTracker(config, logger=logger)


class Session:
    """Holds the formatter and, once needed, the config, tracker and catalog.

    Configuration and the tracker are created lazily so that commands that do
    not talk to the service (``completions``, ``--help``) need no credentials.
    """

    def __init__(
        self,
        formatter: Formatter | None = None,
        verbose: bool = False,
        tracker_factory: TrackerFactory = default_tracker_factory,
    ) -> None:
        self.formatter = formatter or Formatter()
        self.verbose = verbose
        self.tracker_factory = tracker_factory
        self._config: Optional[Config] = None
        self._logger: Optional[JiriLogger] = None
        self._tracker: Optional[IssueTracker] = None
        self._catalog: Optional[FieldCatalogCache] = None

    @property
    def config(self) -> Config:
        if self._config is None:
            self._config = load_config()
        return self._config

    @property
    def logger(self) -> JiriLogger:
        if self._logger is None:
            self._logger = JiriLogger(
                log_dir=self.config.log_dir,
                console_level="DEBUG" if self.verbose else "WARNING",
            )
        return self._logger

    @property
    def tracker(self) -> IssueTracker:
        if self._tracker is None:
            self._tracker = self.tracker_factory(self.config, self.logger)
        return self._tracker

    @property
    def catalog(self) -> FieldCatalogCache:
        """Field catalog cache, owned by this session."""
        if self._catalog is None:
            self._catalog = FieldCatalogCache(self.tracker)
        return self._catalog

    def close(self) -> None:
        close = getattr(self._tracker, "close", None)
        if callable(close):
            close()
