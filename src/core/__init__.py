"""Core primitives.

This module holds errors, constants, configuration, logging, and the
typed models shared by the schema and store layers.
"""
