"""Small building blocks: error numbers, containers, buffers, clocks, events, options, a command tree, file helpers and logging."""

__version__ = "0.1.0"