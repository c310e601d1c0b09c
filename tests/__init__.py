"""Test suite for Movie Explorer."""
