"""
railshadow — mirror a React/TypeScript prototype into Rails shadow artifacts.
"""

__version__ = "0.1.0"
