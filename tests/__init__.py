"""Test package for courtside."""
