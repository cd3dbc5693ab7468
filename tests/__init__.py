"""Test suite for the tekton-yaml package.

Covers node lookups, document composition and classification, task and
resource extraction, whole-source queries and the command-line tool.
"""
