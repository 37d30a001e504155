"""Query handler: searches and term analysis."""

from typing import TYPE_CHECKING

from sajari_sdk.logging_config import get_logger
from sajari_sdk.query.request import Request
from sajari_sdk.query.results import Results, results_from_wire
from sajari_sdk.records.batch import BatchResult, ItemResult, check_status_count, record_status_error
from sajari_sdk.records.models import Key, keys_to_wire
from sajari_sdk.wire import api, query

if TYPE_CHECKING:
    from sajari_sdk.client import Client

logger = get_logger(__name__)

SEARCH_METHOD = "sajari.api.query.v1.Query/Search"
ANALYSE_METHOD = "sajari.engine.query.v1.Query/Analyse"


class Query:
    """Runs queries on a collection. Use Client.query to create one."""

    def __init__(self, client: "Client") -> None:
        self._client = client

    async def search(self, request: Request) -> Results:
        """Run a search.

        Args:
            request: The search request.

        Returns:
            Decoded results.

        Raises:
            ValidationError: If the request cannot be encoded.
        """
        message = request.to_wire()
        response = await self._client.call(SEARCH_METHOD, message, api.SearchResponse)

        results = results_from_wire(response.search_response, response.tokens)
        logger.debug(
            f"Search returned {len(results.results)} results",
            extra={"total_results": results.total_results, "reads": results.reads},
        )
        return results

    async def analyse_multi(self, keys: list[Key], request: Request) -> BatchResult[list[str]]:
        """Find the terms each record shares with a request.

        Args:
            keys: Records to analyse.
            request: Request to compare against.

        Returns:
            Overlapping terms for each key, in order.

        Raises:
            ValidationError: If the request or keys cannot be encoded.
        """
        if not keys:
            return BatchResult([])

        message = query.AnalyseRequest(
            search_request=request.engine_request(),
            keys=keys_to_wire(keys),
        )
        response = await self._client.call(ANALYSE_METHOD, message, query.AnalyseResponse)
        check_status_count(response.status, len(keys), ANALYSE_METHOD)

        items: list[ItemResult[list[str]]] = []
        for i in range(len(keys)):
            error = record_status_error(response.status[i]) if response.status else None
            terms = response.terms[i].terms if i < len(response.terms) else []
            items.append(ItemResult(value=None if error else list(terms), error=error))
        return BatchResult(items)

    async def analyse(self, key: Key, request: Request) -> list[str]:
        """Find the terms the record identified by key shares with a request.

        Raises:
            RecordNotFoundError: If no record has the key.
            RemoteStatusError: If the service reports another failure.
        """
        batch = await self.analyse_multi([key], request)
        return batch.first() or []
