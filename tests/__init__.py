"""
Tests for the combat log DPS parser.

This package contains tests for:
- Timestamp parsing and line tokenization
- Aggregation, ranking and parallel processing
- Target detection, display helpers and roster import
- Configuration, the CLI and the HTTP API
"""
