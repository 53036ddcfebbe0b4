"""codlayout — CLI do parsowania, budowania i walidacji formuł układu."""

__version__ = "0.1.0"
