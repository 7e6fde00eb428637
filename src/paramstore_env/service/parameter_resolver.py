"""Resolves parameter store contents into environment variables."""

from typing import Dict, MutableMapping, Optional, Tuple

from ..domain.interfaces import Logger, MetricsClient, ParameterStoreClient
from ..domain.parameter import FetchMode, ParameterRecord, PathScopedFetch
from ..domain.result import FetchError
from ..infra.metrics import NullMetricsClient


class ParameterResolver:
    """Populates an environment map from the parameter store.

    Fetching is best effort: remote failures are logged and skipped, they
    never propagate to the caller.
    """

    def __init__(
        self,
        parameter_store: ParameterStoreClient,
        logger: Logger,
        metrics_client: Optional[MetricsClient] = None,
    ):
        """Initialize resolver."""
        self.parameter_store = parameter_store
        self.logger = logger
        self.metrics_client = metrics_client or NullMetricsClient()

    def populate_environment(
        self,
        env: MutableMapping[str, str],
        path: Optional[str] = None,
        recursive: Optional[bool] = False,
    ) -> int:
        """
        Add parameters to ``env`` as environment variables.

        Without a path every parameter is listed and fetched one by one; a
        failing parameter is skipped. With a path the parameters under it are
        fetched in one paginated call; if that call fails nothing is added.
        Existing entries are kept unless a variable name collides, in which
        case the later parameter wins.

        Args:
            env: Environment map to write into.
            path: Hierarchy path, empty or None for a flat scan.
            recursive: Include nested hierarchy levels under ``path``.

        Returns:
            Number of variables written.
        """
        mode = FetchMode.select(path, recursive)
        if isinstance(mode, PathScopedFetch):
            injected, failed = self._populate_by_path(env, mode)
        else:
            injected, failed = self._populate_flat(env)

        self.logger.info(
            "Parameter store environment prepared",
            mode=mode.name,
            injected=injected,
            failed=failed,
        )
        self.metrics_client.put_metric("ParametersInjected", float(injected))
        if failed:
            self.metrics_client.put_metric("ParameterFetchFailures", float(failed))
        return injected

    def _populate_flat(self, env: MutableMapping[str, str]) -> Tuple[int, int]:
        listing = self.parameter_store.list_parameter_names()
        if not listing.is_ok:
            self._log_failure("Cannot fetch parameters", listing.error)
            return 0, 1

        injected = failed = 0
        for name in listing.value:
            result = self.parameter_store.get_parameter_value(name)
            if not result.is_ok:
                self._log_failure("Cannot fetch parameter", result.error)
                failed += 1
                continue
            self._put(env, ParameterRecord(name, result.value))
            injected += 1
        return injected, failed

    def _populate_by_path(
        self, env: MutableMapping[str, str], mode: PathScopedFetch
    ) -> Tuple[int, int]:
        result = self.parameter_store.get_parameters_by_path(mode.path, mode.recursive)
        if not result.is_ok:
            self._log_failure("Cannot fetch parameters by path", result.error, path=mode.path)
            return 0, 1

        injected = 0
        for record in result.value:
            if record.value is None:
                continue
            self._put(env, record)
            injected += 1
        return injected, 0

    def _put(self, env: MutableMapping[str, str], record: ParameterRecord) -> None:
        env[record.env_name] = record.value
        self.logger.info("Injected parameter", parameter=record.name, variable=record.env_name)

    def _log_failure(self, message: str, error: Optional[FetchError], **context: str) -> None:
        details: Dict[str, Optional[str]] = dict(context)
        if error is not None:
            details.update(
                operation=error.operation,
                parameter=error.name,
                code=error.code,
                error=error.message,
            )
        self.logger.warning(message, **{k: v for k, v in details.items() if v is not None})
