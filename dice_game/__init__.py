"""Dice game HTTP backend."""
