"""
mixdeck - Interfaces Package
============================

Contains all user-facing interfaces (presentation layer).
"""
