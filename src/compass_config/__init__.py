"""
Compass Project Configuration Package

This is the authoritative, tool-agnostic representation of a Compass/Sass
project manifest (config.rb).

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Sass compilation
    - Asset copying or file watching
    - Ruby beyond the manifest's assignment syntax

This package defines PROJECT CONFIGURATION only.

Parsing, validation and output generation happen in separate layers.
"""

__version__ = "0.1.0"
