from logging import getLogger
from typing import Any, Optional, Type, TypeVar

from httpx import AsyncClient, Client, Response
from pydantic import BaseModel

from .._config import ConfigurationManager, NetworkConfig
from .._utils import PreparedRequest, RequestSpec, build_request, handle_errors
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import LOGGER_NAME
from ..models.errors import APIError

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseService:
    """Base class for the news API services.

    Builds every request from a ``RequestSpec`` and the configuration that is
    current at call time, then sends it with httpx. A request that fails to
    build is never sent.
    """

    def __init__(
        self,
        config: ConfigurationManager | NetworkConfig,
        *,
        client: Optional[Client] = None,
        client_async: Optional[AsyncClient] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config_manager = (
            config
            if isinstance(config, ConfigurationManager)
            else ConfigurationManager(config)
        )

        # Clients are created on first use, so a sync-only caller never
        # leaves an unclosed AsyncClient behind.
        self._client = client
        self._client_async = client_async

        super().__init__()

    @property
    def config(self) -> NetworkConfig:
        return self._config_manager.current

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = Client(**get_httpx_client_kwargs())
        return self._client

    @property
    def client_async(self) -> AsyncClient:
        if self._client_async is None:
            self._client_async = AsyncClient(**get_httpx_client_kwargs())
        return self._client_async

    def prepare(self, spec: RequestSpec) -> PreparedRequest:
        return build_request(spec, self.config, logger=self._logger)

    def request(self, spec: RequestSpec) -> Response:
        with handle_errors():
            prepared = self.prepare(spec)
            self._logger.debug(f"Request: {prepared.method.value} {prepared.url.path}")

            response = self.client.send(prepared.to_httpx())
            try:
                response.raise_for_status()
            finally:
                if response.is_error:
                    response.close()
            return response

    async def request_async(self, spec: RequestSpec) -> Response:
        with handle_errors():
            prepared = self.prepare(spec)
            self._logger.debug(f"Request: {prepared.method.value} {prepared.url.path}")

            response = await self.client_async.send(prepared.to_httpx())
            try:
                response.raise_for_status()
            finally:
                if response.is_error:
                    await response.aclose()
            return response

    def request_model(self, spec: RequestSpec, model: Type[ModelT]) -> ModelT:
        response = self.request(spec)
        return self._decode(response, model)

    async def request_model_async(
        self, spec: RequestSpec, model: Type[ModelT]
    ) -> ModelT:
        response = await self.request_async(spec)
        return self._decode(response, model)

    def _decode(self, response: Response, model: Type[ModelT]) -> ModelT:
        with handle_errors():
            payload: Any = response.json()
            if isinstance(payload, dict) and payload.get("status") == "error":
                raise APIError(
                    payload.get("message") or "Unknown API error",
                    response.status_code,
                    response.text,
                    payload.get("code"),
                )
            return model.model_validate(payload)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()

    async def aclose(self) -> None:
        self.close()
        if self._client_async is not None:
            await self._client_async.aclose()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
