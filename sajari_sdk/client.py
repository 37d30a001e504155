"""Client bound to a project and collection."""

from types import TracebackType
from typing import TypeVar

import pydantic

from sajari_sdk.autocomplete.service import Model as AutocompleteModel
from sajari_sdk.bayes.service import Model as BayesModel, TrainingSet
from sajari_sdk.config import ClientSettings, get_settings
from sajari_sdk.exceptions import ConfigurationError, ErrorCode, ValidationError
from sajari_sdk.logging_config import get_logger
from sajari_sdk.pipeline.service import Pipeline
from sajari_sdk.query.service import Query
from sajari_sdk.records.service import RecordStore
from sajari_sdk.schema.service import Schema
from sajari_sdk.transport.credentials import Credentials, KeyCredentials
from sajari_sdk.transport.service import HTTPTransport, RPCTransport
from sajari_sdk.wire.base import WireMessage

logger = get_logger(__name__)

ResponseT = TypeVar("ResponseT", bound=WireMessage)

PROJECT_KEY = "project"
COLLECTION_KEY = "collection"


class Client:
    """Makes calls to the service on behalf of one project and collection.

    A single Client may be shared by concurrent tasks. Resource handles
    (query, pipeline, records, schema, autocomplete and bayes models) are
    cheap views over it.
    """

    def __init__(
        self,
        project: str | None = None,
        collection: str | None = None,
        settings: ClientSettings | None = None,
        credentials: Credentials | None = None,
        transport: RPCTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            project: Project name. Defaults to the configured project.
            collection: Collection name. Defaults to the configured collection.
            settings: Client configuration. Uses defaults if not provided.
            credentials: Credentials for every call. Built from the configured
                key ID and secret when not provided.
            transport: Transport to use (for testing). Defaults to HTTP.

        Raises:
            ConfigurationError: If project or collection is missing.
        """
        self._settings = settings or get_settings().client
        self.project = project or self._settings.project
        self.collection = collection or self._settings.collection

        if not self.project:
            raise ConfigurationError("project not set")
        if not self.collection:
            raise ConfigurationError("collection not set")

        if credentials is None and self._settings.key_id and self._settings.key_secret:
            credentials = KeyCredentials(self._settings.key_id, self._settings.key_secret)

        self._transport = transport or HTTPTransport(self._settings, credentials)
        self._owns_transport = transport is None

    @property
    def settings(self) -> ClientSettings:
        """Configuration this client was built with."""
        return self._settings

    def metadata(self) -> dict[str, str]:
        """Metadata identifying the project and collection of each call."""
        return {
            PROJECT_KEY: self.project,
            COLLECTION_KEY: self.collection,
        }

    async def call(
        self,
        method: str,
        request: WireMessage,
        response_type: type[ResponseT],
    ) -> ResponseT:
        """Issue one call and decode its response.

        Args:
            method: Fully qualified method name.
            request: Request message.
            response_type: Message type of the response.

        Returns:
            Decoded response message.

        Raises:
            ValidationError: If the response does not match response_type.
        """
        logger.debug(
            f"Calling {method}",
            extra={"project": self.project, "collection": self.collection},
        )
        data = await self._transport.call(method, request.to_json(), self.metadata())

        try:
            return response_type.model_validate(data)
        except pydantic.ValidationError as e:
            raise ValidationError(
                f"Invalid response from {method}: {e}",
                code=ErrorCode.INVALID_RESPONSE,
                details={"method": method},
            ) from e

    def query(self) -> Query:
        """Handle for running searches on the collection."""
        return Query(self)

    def pipeline(self, name: str) -> Pipeline:
        """Handle for the named query pipeline."""
        return Pipeline(self, name)

    def records(self) -> RecordStore:
        """Handle for adding, fetching, mutating and deleting records."""
        return RecordStore(self)

    def schema(self) -> Schema:
        """Handle for managing the collection schema."""
        return Schema(self)

    def autocomplete(self, name: str) -> AutocompleteModel:
        """Handle for the named autocomplete model."""
        return AutocompleteModel(self, name)

    def training_set(self, name: str) -> TrainingSet:
        """Handle for the named bayes training set."""
        return TrainingSet(self, name)

    def bayes_model(self, name: str) -> BayesModel:
        """Handle for the named bayes model."""
        return BayesModel(self, name)

    async def close(self) -> None:
        """Release the transport if this client created it."""
        if self._owns_transport:
            await self._transport.close()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
