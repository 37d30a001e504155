"""Bayes classifiers: training sets, training and classification."""

from sajari_sdk.bayes.models import Class, ClassErrorCount, TrainResults
from sajari_sdk.bayes.service import Model, TrainingSet

__all__ = ["Class", "ClassErrorCount", "Model", "TrainResults", "TrainingSet"]
