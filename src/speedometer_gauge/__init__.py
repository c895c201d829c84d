"""Speedometer gauge value mapping."""
