"""patternkit - Root Package.

A collection of five canonical object-oriented design-pattern examples, each
implemented as a small, self-contained and independently testable component.

Key Components:
    - singleton: lazily created, thread-safe shared instances
    - factory: creator hierarchy selecting transports by logistics category
    - observer: store/customer notification broadcasting
    - decorator: layered coffee add-ons aggregating cost and description
    - strategy: pluggable compression algorithms behind a compressor context

Supporting packages:
    - config: pydantic configuration schemas and the configuration manager
    - domain: exception hierarchy shared by all components
    - infrastructure: logging and shared singleton machinery
    - cli: command-line front end

Usage:
    The components are used directly from Python or through the CLI:

        $ patternkit deliver road
        $ patternkit coffee --add milk --add sugar
"""

from ._version import __version__

__author__ = "patternkit contributors"
__package_name__ = "patternkit"

__all__ = ["__version__"]
