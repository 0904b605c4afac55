"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the network core to its data sources:
- Flight data (CSV files, in-memory records)
"""
