"""Bayes classes and training results."""

from pydantic import BaseModel, ConfigDict, Field

from sajari_sdk.wire import bayes


class Class(BaseModel):
    """A bayes class."""

    model_config = ConfigDict(frozen=True)

    name: str


class ClassErrorCount(BaseModel):
    """Number of records incorrectly classified into a class."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    class_: Class = Field(..., alias="class")
    count: int = Field(default=0, ge=0)


class TrainResults(BaseModel):
    """Outcome of training a model from a training set.

    Attributes:
        correct: Records classified correctly.
        incorrect: Records classified incorrectly.
        errors: Misclassification counts grouped by the class records
            were wrongly assigned to.
    """

    correct: int = 0
    incorrect: int = 0
    errors: dict[str, list[ClassErrorCount]] = Field(default_factory=dict)

    @property
    def accuracy(self) -> float:
        """Fraction of records classified correctly; 0.0 when nothing was classified."""
        total = self.correct + self.incorrect
        if total == 0:
            return 0.0
        return self.correct / total

    @classmethod
    def from_wire(cls, response: bayes.TrainResponse) -> "TrainResults":
        errors: dict[str, list[ClassErrorCount]] = {}
        for error in response.errors:
            c = Class(name=error.got)
            errors.setdefault(c.name, []).append(ClassErrorCount(**{"class": c, "count": error.count}))
        return cls(correct=response.correct, incorrect=response.incorrect, errors=errors)
