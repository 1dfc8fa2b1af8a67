"""Creation Hub content service: Content Repository aggregation and the LinkedIn preview step."""

__version__ = "1.0.0"
