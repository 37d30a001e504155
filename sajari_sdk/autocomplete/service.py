"""Autocomplete model handler."""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from sajari_sdk.logging_config import get_logger
from sajari_sdk.wire import autocomplete, engine

if TYPE_CHECKING:
    from sajari_sdk.client import Client

logger = get_logger(__name__)

TRAIN_CORPUS_METHOD = "sajari.autocomplete.Train/TrainCorpus"
TRAIN_QUERY_METHOD = "sajari.autocomplete.Train/TrainQuery"
AUTOCOMPLETE_METHOD = "sajari.autocomplete.Query/AutoComplete"


class Model:
    """A named autocomplete model in a collection."""

    def __init__(self, client: "Client", name: str) -> None:
        self._client = client
        self.name = name

    def _model(self) -> autocomplete.Model:
        return autocomplete.Model(name=self.name)

    async def train_corpus(self, terms: Sequence[str]) -> None:
        """Train spelling correction with correctly spelt terms."""
        message = autocomplete.TrainCorpusRequest(model=self._model(), terms=list(terms))
        await self._client.call(TRAIN_CORPUS_METHOD, message, engine.Empty)
        logger.debug(
            f"Trained autocomplete model {self.name} on {len(terms)} terms",
            extra={"model": self.name},
        )

    async def train_query(self, phrase: str) -> None:
        """Train partial-query completion with a successful query phrase."""
        message = autocomplete.TrainQueryRequest(model=self._model(), phrase=phrase)
        await self._client.call(TRAIN_QUERY_METHOD, message, engine.Empty)

    async def complete(self, phrase: str, terms: Sequence[str] = ()) -> list[str]:
        """Suggest completions for a phrase.

        Args:
            phrase: Prefix sequence to complete.
            terms: Terms of the phrase, used for spelling correction and
                fuzzy matching.

        Returns:
            Completions, best first.
        """
        message = autocomplete.AutoCompleteRequest(
            model=self._model(),
            phrase=phrase,
            terms=list(terms),
        )
        response = await self._client.call(AUTOCOMPLETE_METHOD, message, autocomplete.AutoCompleteResponse)
        return list(response.phrases)
