"""diagramkit - Root Package.

A console-driven walkthrough of classic object-oriented design patterns
around a fictional graph/figure drawing tool. Nothing is rendered; every
operation writes a line of text.

Key Components:
    - domain: Diagram elements, subscribers, flyweight figures and events
    - application: Builders, factories, commands, export visitor and facade
    - infrastructure: Console output, logging and event publishing
    - config: Typed configuration and its manager
    - cli: Command-line entry point

Architecture:
    The package keeps the layered split of domain, application and
    infrastructure. All collaborators are constructed explicitly and passed
    in, so no component depends on process-global state.
"""

from ._version import __version__

__author__ = "diagramkit maintainers"
__package_name__ = "diagramkit"
