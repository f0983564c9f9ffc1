"""papilio — life-wheel task tracker."""

__version__ = "0.1.0"
