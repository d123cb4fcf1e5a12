from typing import Optional

from ._config import AuthMode, ConfigurationManager, NetworkConfig, load_config_from_env
from ._services import NewsService
from ._utils import setup_logging


class NewsClient:
    """Entry point to the news API.

    Reads its settings from the arguments or, when omitted, from the
    ``NEWSAPI_KEY``, ``NEWSAPI_URL`` and ``NEWSAPI_AUTH_MODE`` environment
    variables (a ``.env`` file is honoured).
    """

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        auth: Optional[AuthMode] = None,
        debug: bool = False,
    ) -> None:
        """
        Args:
            api_key (Optional[str]): The news API key.
            base_url (Optional[str]): API root. Defaults to ``https://newsapi.org/v2/``.
            auth (Optional[str]): ``header`` (default) or ``query``.
            debug (bool): Enable debug logging if set to True. Defaults to False.
        """
        setup_logging(debug)
        self._config_manager = ConfigurationManager(
            load_config_from_env(api_key=api_key, base_url=base_url, auth=auth)
        )
        self._news: Optional[NewsService] = None

    @property
    def config(self) -> NetworkConfig:
        return self._config_manager.current

    def rotate_api_key(self, api_key: str) -> None:
        """Swap in a configuration carrying a new API key.

        Requests already being built keep using the previous configuration.
        """
        current = self._config_manager.current
        auth: AuthMode = "query" if current.query_parameters else "header"
        self._config_manager.swap(
            NetworkConfig.for_news_api(api_key, base_url=current.base_url, auth=auth)
        )

    @property
    def news(self) -> NewsService:
        """Top headlines, article search and the list of sources."""
        if self._news is None:
            self._news = NewsService(self._config_manager)
        return self._news
