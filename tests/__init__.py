"""
Test Suite for the Expense Ledger

Test Structure:
- unit/: Unit tests mirroring src/ package structure
- integration/: End-to-end CLI and configuration tests

Test Categories:
- Core utilities (currency, money, models)
- Ledger store against temporary SQLite databases
- Command parsing, dispatch and rendering

All tests run against throwaway SQLite files; no real ledger is touched.
"""
