"""Routing: ordered path patterns for the fallback application."""

from urlshort.routing.router import Route, Router, compile_pattern

__all__ = ["Route", "Router", "compile_pattern"]
