"""Storyboard operations: gate, ownership resolution and store access."""
