"""Wire messages exchanged with the service.

Submodules mirror the service interface definitions:
engine (values, keys, statuses), query, api, store, schema,
autocomplete and bayes.
"""
