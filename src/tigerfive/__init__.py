"""Tiger Five golf tracker."""

__version__ = "0.1.0"
