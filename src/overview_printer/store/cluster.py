"""Object store backed by a live cluster through the kubernetes dynamic client.

Provides lazy client initialization from kubeconfig (falling back to
in-cluster config), retry with tenacity for transient failures, and
translation of API errors into printer exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from overview_printer.exceptions import UpstreamError
from overview_printer.store.interfaces import Key, ObjectStore

if TYPE_CHECKING:
    from kubernetes.dynamic import DynamicClient
    from tenacity.wait import wait_base

    from overview_printer.config import PrinterConfig

logger = structlog.get_logger()


class StoreUnavailableError(UpstreamError):
    """Raised when the API server cannot be reached. Retried before surfacing."""


class ClusterObjectStore(ObjectStore):
    """Object store that queries the Kubernetes API.

    Example:
        ```python
        from overview_printer.config import PrinterConfig
        from overview_printer.store.cluster import ClusterObjectStore

        store = ClusterObjectStore(PrinterConfig.from_env())
        pods = store.list(Key(namespace="default", api_version="v1", kind="Pod"))
        ```
    """

    def __init__(
        self,
        config: PrinterConfig,
        dynamic_client: DynamicClient | None = None,
        wait: wait_base | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            config: Printer configuration (kubeconfig, context, timeout, retries).
            dynamic_client: Pre-built dynamic client. Built lazily when omitted.
            wait: Tenacity wait strategy between retries.
        """
        self._config = config
        self._client = dynamic_client
        self._wait = wait or wait_exponential(multiplier=1, min=1, max=10)
        self._log = logger.bind(store="cluster", context=config.context)

    @property
    def client(self) -> DynamicClient:
        """Dynamic client, created from kubeconfig or in-cluster config on first use."""
        if self._client is None:
            self._client = self._build_client()
        return self._client

    def _build_client(self) -> DynamicClient:
        from kubernetes import client, config
        from kubernetes.config import ConfigException
        from kubernetes.dynamic import DynamicClient

        try:
            api_client = config.new_client_from_config(
                config_file=self._config.kubeconfig,
                context=self._config.context,
            )
            self._log.debug("loaded_kubeconfig", kubeconfig=self._config.kubeconfig)
        except ConfigException:
            try:
                config.load_incluster_config()
                api_client = client.ApiClient()
                self._log.debug("loaded_incluster_config")
            except ConfigException as e:
                raise StoreUnavailableError(
                    message="Cannot load Kubernetes configuration. "
                    "Ensure kubeconfig exists or running inside a cluster.",
                    original_error=e,
                ) from e
        return DynamicClient(api_client)

    def list(self, key: Key) -> list[dict[str, Any]]:
        """List objects matching ``key`` as unstructured dicts."""
        self._log.debug("listing_objects", key=str(key))
        kwargs: dict[str, Any] = {"namespace": key.namespace}
        if key.name:
            kwargs["field_selector"] = f"metadata.name={key.name}"
        if selector := key.label_selector():
            kwargs["label_selector"] = selector

        result = self._call(key, **kwargs)
        items = result.get("items") or []
        item_kind = key.kind
        for item in items:
            # list responses omit per-item type metadata
            item.setdefault("apiVersion", key.api_version)
            item.setdefault("kind", item_kind)
        self._log.debug("listed_objects", key=str(key), count=len(items))
        return items

    def get(self, key: Key) -> dict[str, Any] | None:
        """Get a single named object, or None when it does not exist."""
        self._log.debug("getting_object", key=str(key))
        try:
            return self._call(key, name=key.name, namespace=key.namespace)
        except UpstreamError as e:
            if e.status_code == 404:
                return None
            raise

    def _call(self, key: Key, **kwargs: Any) -> dict[str, Any]:
        retrying = Retrying(
            retry=retry_if_exception_type(StoreUnavailableError),
            stop=stop_after_attempt(max(1, self._config.retry_attempts)),
            wait=self._wait,
            reraise=True,
        )
        for attempt in retrying:
            with attempt:
                return self._request(key, **kwargs)
        raise AssertionError("unreachable")

    def _request(self, key: Key, **kwargs: Any) -> dict[str, Any]:
        from kubernetes.client import ApiException
        from kubernetes.dynamic.exceptions import ResourceNotFoundError

        try:
            resource = self.client.resources.get(api_version=key.api_version, kind=key.kind)
            result = resource.get(_request_timeout=self._config.timeout, **kwargs)
            return dict(result.to_dict())
        except ResourceNotFoundError as e:
            raise UpstreamError(
                message=f"Unknown resource type {key.api_version}/{key.kind}",
                original_error=e,
                resource_type=key.kind,
            ) from e
        except ApiException as e:
            raise self.translate_api_exception(e, key) from e
        except UpstreamError:
            raise
        except Exception as e:
            self._log.warning("store_request_failed", key=str(key), error=str(e))
            raise StoreUnavailableError(
                message=f"Failed to query {key.kind}",
                original_error=e,
                resource_type=key.kind,
                resource_name=key.name,
                namespace=key.namespace,
            ) from e

    @staticmethod
    def translate_api_exception(e: Exception, key: Key) -> UpstreamError:
        """Translate a kubernetes ApiException into an UpstreamError.

        5xx responses become ``StoreUnavailableError`` so they are retried.
        """
        status = getattr(e, "status", None)
        reason = getattr(e, "reason", None)
        error_class = StoreUnavailableError if status and status >= 500 else UpstreamError
        return error_class(
            message=reason or f"Kubernetes API error: {status}",
            original_error=e,
            status_code=status,
            resource_type=key.kind,
            resource_name=key.name,
            namespace=key.namespace,
        )
