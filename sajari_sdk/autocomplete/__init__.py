"""Autocomplete models: training and phrase completion."""

from sajari_sdk.autocomplete.service import Model

__all__ = ["Model"]
