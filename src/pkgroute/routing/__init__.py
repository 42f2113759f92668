"""Routing — translation between package identities and URL path segments.

Building and parsing are pure functions; ``PackageRouter`` maps URL paths
to segments and holds the live current-segments value.
"""
