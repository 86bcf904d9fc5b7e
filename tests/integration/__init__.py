"""
Integration tests for vaultviews.

These tests run the CLI and the HTTP API in-process against real
markdown vaults created in tmp_path.
"""
