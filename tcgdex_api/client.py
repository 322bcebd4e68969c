"""
TCGdex client.

Owns the HTTP connection pool and the selected language, and hands out one
accessor per resource:

    with TcgdexClient() as tcgdex:
        darkness_ablaze = tcgdex.sets.get("swsh3")
        fire_cards = tcgdex.cards.search(Query().with_filtering(["types=Fire"]))
        hp_values = tcgdex.hp.fetch()

Create one client and reuse it for every request.
"""

import logging
from types import TracebackType
from typing import Any

import httpx

from tcgdex_api.config import settings
from tcgdex_api.endpoints.listings import LISTING_RESOURCES, ListingApi
from tcgdex_api.endpoints.resources import CardApi, SerieApi
from tcgdex_api.endpoints.sets import SetApi
from tcgdex_api.models.brief import CardBrief, SerieBrief, SetBrief
from tcgdex_api.models.card import Card
from tcgdex_api.models.card_set import Set
from tcgdex_api.models.lang import Lang
from tcgdex_api.models.serie import Serie

logger = logging.getLogger(__name__)


class TcgdexClient:
    """
    Client for the TCGdex REST API.

    Accessors are bound to the language selected when they are obtained;
    changing the language afterwards does not affect accessors already
    handed out.
    """

    def __init__(
        self,
        lang: Lang | str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            lang: Language of returned data. Defaults to settings.default_lang.
            base_url: API root. Defaults to settings.api_base_url.
            timeout: Request timeout in seconds. Defaults to settings.timeout_seconds.
            http_client: Optional httpx client to use instead of creating one.
                A supplied client is not closed by this client.
        """
        self._lang = Lang.parse(lang or settings.default_lang)
        self.base_url = base_url or settings.api_base_url
        self.timeout = timeout if timeout is not None else settings.timeout_seconds

        self._owns_http = http_client is None
        self.http = http_client or httpx.Client(
            timeout=self.timeout,
            headers={"Accept": "application/json", "User-Agent": settings.user_agent},
            follow_redirects=True,
        )
        logger.debug("TCGdex client ready for %s (%s)", self.base_url, self._lang)

    @property
    def lang(self) -> Lang:
        return self._lang

    def set_lang(self, lang: Lang | str) -> "TcgdexClient":
        """Select the language for accessors obtained from now on."""
        self._lang = Lang.parse(lang)
        return self

    @property
    def cards(self) -> CardApi:
        return CardApi(self.http, self.base_url, self._lang, "cards", Card, CardBrief)

    @property
    def sets(self) -> SetApi:
        return SetApi(self.http, self.base_url, self._lang, "sets", Set, SetBrief)

    @property
    def series(self) -> SerieApi:
        return SerieApi(self.http, self.base_url, self._lang, "series", Serie, SerieBrief)

    @property
    def types(self) -> ListingApi[str]:
        return self._listing("types")

    @property
    def categories(self) -> ListingApi[str]:
        return self._listing("categories")

    @property
    def hp(self) -> ListingApi[int]:
        return self._listing("hp")

    @property
    def illustrators(self) -> ListingApi[str]:
        return self._listing("illustrators")

    @property
    def rarities(self) -> ListingApi[str]:
        return self._listing("rarities")

    @property
    def retreats(self) -> ListingApi[int]:
        return self._listing("retreats")

    def _listing(self, resource: str) -> ListingApi[Any]:
        return ListingApi(self.http, self.base_url, self._lang, resource, LISTING_RESOURCES[resource])

    def close(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "TcgdexClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
