"""File scanning utilities for codox-core."""
