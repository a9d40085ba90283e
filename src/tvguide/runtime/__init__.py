"""
Query-time engine.

Pure derivations of (dataset, region, timezone): time ordering, grid
indexing, selection defaults and the composed guide view.
"""
