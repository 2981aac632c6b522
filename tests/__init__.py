"""Test suite for dictsub.

Unit tests cover the hash table, the dictionary loader and the streaming
engine; ``test_main`` drives the whole program through ``main`` using the
end-to-end scenarios in ``configs/scenarios.yaml``.
"""
