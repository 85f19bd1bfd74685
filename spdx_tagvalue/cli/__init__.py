"""Command implementations for the spdx-tagvalue CLI."""
