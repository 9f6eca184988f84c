"""bidicss: generate LTR and RTL stylesheets from one direction-agnostic source."""

__version__ = "0.1.0"
