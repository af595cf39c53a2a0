"""Factory, strategy and facade illustrated on a simulated payment flow."""

__version__ = "1.0.0"
