"""Bayes training set and model handlers."""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from sajari_sdk.bayes.models import Class, TrainResults
from sajari_sdk.logging_config import get_logger
from sajari_sdk.wire import bayes, engine

if TYPE_CHECKING:
    from sajari_sdk.client import Client

logger = get_logger(__name__)

TRAINING_SET_SERVICE = "sajari.bayes.trainingset.TrainingSet"
CREATE_METHOD = f"{TRAINING_SET_SERVICE}/Create"
ADD_CLASS_METHOD = f"{TRAINING_SET_SERVICE}/AddClass"
UPLOAD_METHOD = f"{TRAINING_SET_SERVICE}/Upload"
INFO_METHOD = f"{TRAINING_SET_SERVICE}/Info"
TRAIN_METHOD = "sajari.bayes.train.Train/Train"
QUERY_METHOD = "sajari.bayes.query.Query/Query"


class TrainingSet:
    """A named set of labelled records used to train bayes models."""

    def __init__(self, client: "Client", name: str) -> None:
        self._client = client
        self.name = name

    async def create(self) -> None:
        """Create the training set."""
        await self._client.call(CREATE_METHOD, bayes.CreateRequest(name=self.name), engine.Empty)
        logger.info(f"Created training set {self.name}", extra={"training_set": self.name})

    async def add_class(self, name: str) -> Class:
        """Add a class to the training set."""
        message = bayes.AddClassRequest(name=self.name, class_name=name)
        await self._client.call(ADD_CLASS_METHOD, message, engine.Empty)
        return Class(name=name)

    async def add_record(self, cls: Class, data: Sequence[str]) -> str:
        """Add a record to a class.

        Returns:
            SHA1 hash of the uploaded data.
        """
        message = bayes.UploadRequest(name=self.name, class_name=cls.name, data=list(data))
        response = await self._client.call(UPLOAD_METHOD, message, bayes.UploadResponse)
        return response.hash

    async def classes(self) -> list[Class]:
        """List the classes in the training set."""
        response = await self._client.call(INFO_METHOD, bayes.InfoRequest(name=self.name), bayes.InfoResponse)
        return [Class(name=c) for c in response.classes]

    async def train(self, model: str) -> TrainResults:
        """Train a model named model from the training set.

        Returns:
            Accuracy figures from training.
        """
        message = bayes.TrainRequest(name=self.name, model=model)
        response = await self._client.call(TRAIN_METHOD, message, bayes.TrainResponse)

        results = TrainResults.from_wire(response)
        logger.info(
            f"Trained model {model} from {self.name}: accuracy {results.accuracy:.3f}",
            extra={"training_set": self.name, "model": model, "correct": results.correct},
        )
        return results


class Model:
    """A trained bayes model."""

    def __init__(self, client: "Client", name: str) -> None:
        self._client = client
        self.name = name

    async def classify(self, data: Sequence[str]) -> Class:
        """Classify data, returning the best matching class."""
        message = bayes.QueryRequest(model=self.name, data=list(data))
        response = await self._client.call(QUERY_METHOD, message, bayes.QueryResponse)
        return Class(name=response.best)
