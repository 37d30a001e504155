"""Named query pipelines."""

from sajari_sdk.pipeline.service import SEARCH_METHOD, Pipeline

__all__ = ["Pipeline", "SEARCH_METHOD"]
