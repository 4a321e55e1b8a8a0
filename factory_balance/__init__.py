"""Consolidated balance-sheet reporting for a manufacturing operation."""
