"""Routing — ordered path-pattern table with precompiled matchers.

Templates are parsed and compiled once when a ``Classifier`` is built
and tried in table order on every request.
"""
