"""Client for the public ``translate_a/single`` endpoint.

One call to `TranslateClient.translate` validates the input, builds the request, performs a single GET
and maps the JSON answer onto the result model of the requested intent. The client never retries,
caches or paces requests; the endpoint throttles bursts of calls, so callers should serialise them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from core.trans.contract import IntentContract
from core.trans.interface import MalformedResponseError, TransportError
from core.trans.registry import LanguageRegistry
from core.trans.request_builder import RequestBuilder
from core.trans.response_mapper import ResponseMapper
from handlers.async_comm import AsyncCommContentError, AsyncCommError, AsyncHttp
from models.config_models import DEFAULT_HOST
from models.translation_models import AUTO_LANGUAGE, Intent, TranslationQuery
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from core.trans.interface import Transport
    from models.config_models import Config
    from models.language_models import LanguageEntry
    from models.result_models import IntentResult
    from models.translation_models import BuiltRequest

__all__: list[str] = ["TranslateClient"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class TranslateClient:
    """Queries the translation endpoint and returns typed, intent-specific results.

    Args:
        registry (LanguageRegistry | None): Language table. Defaults to the bundled table.
        transport (Transport | None): HTTP collaborator. Defaults to an `AsyncHttp` owned and closed
            by this client.
        host (str): Host serving the endpoint.
        timeout (float): Total timeout of one request in seconds.
        proxies (dict[str, str] | None): Proxies keyed by scheme, passed to the transport.
    """

    def __init__(
        self,
        *,
        registry: LanguageRegistry | None = None,
        transport: Transport | None = None,
        host: str = DEFAULT_HOST,
        timeout: float = 10.0,
        proxies: dict[str, str] | None = None,
    ) -> None:
        self.registry: LanguageRegistry = registry if registry is not None else LanguageRegistry.default()
        self.contract: IntentContract = IntentContract()
        self.builder: RequestBuilder = RequestBuilder(self.registry, host=host)
        self.mapper: ResponseMapper = ResponseMapper(self.registry)
        self.timeout: float = timeout
        self.proxies: dict[str, str] | None = proxies
        self._owns_transport: bool = transport is None
        self.__transport: Transport | None = transport

    @classmethod
    def from_config(cls, config: Config, *, transport: Transport | None = None) -> Self:
        """Create a client from the TRANSLATION section of a loaded configuration."""
        proxy: str = config.TRANSLATION.PROXY.strip()
        return cls(
            transport=transport,
            host=config.TRANSLATION.HOST,
            timeout=config.TRANSLATION.TIMEOUT,
            proxies={"http": proxy, "https": proxy} if proxy else None,
        )

    @property
    def transport(self) -> Transport:
        if self.__transport is None:
            self.__transport = AsyncHttp()
        return self.__transport

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        await self.close()

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and self.__transport is not None:
            await self.__transport.close()
        logger.debug("'%s' process termination", self.__class__.__name__)

    def supported_languages(self) -> tuple[LanguageEntry, ...]:
        return self.registry.entries

    async def translate(
        self,
        text: str,
        source_language: str = AUTO_LANGUAGE,
        target_language: str = "",
        intent: Intent = Intent.TRANSLATION,
    ) -> IntentResult:
        """Query the endpoint for ``text`` and return the result of ``intent``.

        Args:
            text (str): Text to query. Definition, synonym and example intents accept a single word.
            source_language (str): Source language name or code, "auto" to let the endpoint detect it.
            target_language (str): Target language name or code. Required for translation,
                alternative, dictionary and example intents.
            intent (Intent): Requested category of information.

        Returns:
            IntentResult: The result model of ``intent``.

        Raises:
            ValidationError: If the input violates the rules of ``intent``. Nothing is sent.
            TransportError: If the request fails.
            MalformedResponseError: If the answer lacks the data ``intent`` needs.
        """
        self.contract.validate(intent, text, target_language)

        query = TranslationQuery(
            text=text,
            source_language=source_language,
            target_language=target_language,
            intent=intent,
        )
        request: BuiltRequest = self.builder.build(query)
        logger.info("'%s': start query (%s > %s)", intent, request.source_code, request.target_code)

        payload: Any = await self._fetch(request.url)
        result: IntentResult = self.mapper.map(intent, payload)
        logger.info("'%s': query completed", intent)
        logger.debug("'return': '%s'", result)
        return result

    async def _fetch(self, url: str) -> Any:
        try:
            return await self.transport.get(url=url, total_timeout=self.timeout, proxies=self.proxies)
        except AsyncCommContentError as err:
            logger.error(err)
            msg = "the translation endpoint returned a body that cannot be decoded"
            raise MalformedResponseError(msg) from err
        except AsyncCommError as err:
            logger.error(err)
            msg = f"the request to the translation endpoint failed: {err.msg}"
            raise TransportError(msg, status=err.status) from err
