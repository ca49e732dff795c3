"""
Core utilities — shared exceptions used across config, probe, and runner.
"""
