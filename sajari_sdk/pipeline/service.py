"""Pipeline handler: searches run through a named server-side pipeline."""

from collections.abc import Mapping
from typing import TYPE_CHECKING

from sajari_sdk.logging_config import get_logger
from sajari_sdk.query.request import Tracking
from sajari_sdk.query.results import Results, results_from_wire
from sajari_sdk.wire import api

if TYPE_CHECKING:
    from sajari_sdk.client import Client

logger = get_logger(__name__)

SEARCH_METHOD = "sajari.api.pipeline.v1.Query/Search"


class Pipeline:
    """A named query pipeline. Use Client.pipeline to create one."""

    def __init__(self, client: "Client", name: str) -> None:
        self._client = client
        self.name = name

    async def search(
        self,
        values: Mapping[str, str],
        tracking: Tracking | None = None,
    ) -> tuple[Results, dict[str, str]]:
        """Run a search through the pipeline.

        Args:
            values: Input parameters for the pipeline, e.g. ``{"q": "shoes"}``.
            tracking: Tracking for generated result tokens.

        Returns:
            The results and the values after the pipeline's transformations.
        """
        message = api.PipelineSearchRequest(
            pipeline=api.PipelineRef(name=self.name),
            tracking=(tracking or Tracking()).to_wire(),
            values=dict(values),
        )
        response = await self._client.call(SEARCH_METHOD, message, api.PipelineSearchResponse)

        results = results_from_wire(response.search_response, response.tokens)
        logger.debug(
            f"Pipeline {self.name} returned {len(results.results)} results",
            extra={"pipeline": self.name, "total_results": results.total_results},
        )
        return results, dict(response.values)
